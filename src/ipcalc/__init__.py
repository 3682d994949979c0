"""
IPCalc - IPv4 Subnet Arithmetic

A small toolkit for network engineers: CIDR parsing, network and
broadcast calculation, containment tests, and summarization of
arbitrary address ranges into the minimal set of CIDR blocks.
"""

__version__ = "0.1.0"
__author__ = "IPCalc contributors"
