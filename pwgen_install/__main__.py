#!/usr/bin/env python3
"""
PwGen Install Helper module entry point
Allows running: python3 -m pwgen_install
"""

from pwgen_install.cli import main

if __name__ == '__main__':
    main()
