"""
Shop microservices: API gateway plus customer, product and order services
"""
