"""
Test suite for PolluMap
"""
