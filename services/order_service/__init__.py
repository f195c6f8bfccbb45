"""
Order Service - owns the ``orders`` collection
"""
