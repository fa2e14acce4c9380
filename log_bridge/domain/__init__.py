"""
Domain Layer

Engine event model, protocols for both sides of the bridge, and the
translation services connecting them.
"""
