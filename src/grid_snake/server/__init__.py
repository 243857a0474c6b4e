"""HTTP and WebSocket front end for a single game session."""
