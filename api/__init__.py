"""
api — HTTP surface of the relay (routes, dependencies, middleware).
"""
