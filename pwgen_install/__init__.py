"""
PwGen Install Helper - Quick install widget for PwGen-rust
Detects the visitor's platform and shows the matching install command.
"""

__version__ = "1.2.0"
__author__ = "HxHippy, Kief Studio, TRaViS"

# Submodules are imported on-demand; config imports __version__ from here

__all__ = ["__version__"]
