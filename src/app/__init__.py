"""
Application Layer - composition root
"""
