"""Bundled YAML configuration (loaded by managers.ConfigManager)"""
