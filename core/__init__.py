"""
core — handshake orchestration and the relay error taxonomy.
"""
