"""
Client-side scene objects, rendering and the template viewer.
"""
