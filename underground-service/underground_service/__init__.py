"""
GMUnderground Service - student community feed, events and marketplace
"""
