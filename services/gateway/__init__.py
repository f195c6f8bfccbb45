"""
API Gateway - single public entry point for the shop backend
"""
