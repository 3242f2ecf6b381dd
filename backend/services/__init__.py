"""
Services that drive the simulation core: tick timers and the game session.
"""
