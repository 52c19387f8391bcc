"""
Lambda Hubs API — Controllers Package
=======================================

What:  Handler implementations referenced by name from the routers.

Controller Inventory:
    - adopters.py: AdopterController (list, get, dogs, plus three placeholders)
"""
