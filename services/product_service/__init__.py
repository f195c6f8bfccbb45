"""
Product Service - owns the ``products`` collection
"""
