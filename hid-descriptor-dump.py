#!/usr/bin/env python3
#
# hid-descriptor-dump.py
#
# Lists attached USB HID devices, reads the report descriptor of the chosen
# one, and prints it as an annotated listing.

import sys

from hidreport.cli import main

if __name__ == "__main__":
    sys.exit(main())
