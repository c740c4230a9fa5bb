"""
Game host - frame state and input bindings
"""
