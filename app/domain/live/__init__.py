"""
Live streaming domain logic.

Includes:
- live_stream: Patron access resolution for event live streams.
"""
