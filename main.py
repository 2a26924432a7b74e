#!/usr/bin/env python3
"""
Controller Options - Main Entry Point

This is the main entry point for the Controller Options checker.
It can be run directly or imported as a module.
"""

from controller_options.cli.main import main

if __name__ == "__main__":
    main()
