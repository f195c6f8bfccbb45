"""
Customer Service - owns the ``customers`` collection
"""
