"""
Commercial paper emission simulator.
"""
