#!/usr/bin/env python3
"""
Hook to block creation of variant files ("enhanced", "simple", "v2", "backup", ...).
Agents must edit the existing file in place instead of adding an alternate copy.

Register as a PreToolUse hook for the Write tool and for patch tools.
"""
import os
import sys

# Allow running from a checkout without installing the package
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from variant_guard.hook import main


if __name__ == "__main__":
    sys.exit(main())
