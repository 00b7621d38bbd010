"""Classroom peer evaluation server and clients"""
__version__ = "1.0.0"
