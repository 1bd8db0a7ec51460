"""Paths relative to the dotfield package directory."""

CONFIG = "config.toml"
OUTPUT = "output"
PIC_SCRIPTS = "pic_scripts"
