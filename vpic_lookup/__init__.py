"""
vPIC Lookup - NHTSA VIN decode, vehicle descriptor and recall lookups
"""

__version__ = "1.0.0"
