"""
Recruit Portal - Services Package
"""
