"""ccicheck - input checks for Huawei Cloud CCI deployment actions"""

__version__ = "0.1.0"
