"""Scanning, validation, matching, ancestry and formatting of resource names."""