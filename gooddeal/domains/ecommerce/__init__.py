"""
E-commerce Domain

Product catalog and customer orders.
"""
