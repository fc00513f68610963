"""
Mars rover simulation service package.

This service is responsible for:
- Holding the single rover instance and its position/heading state.
- Applying single-character movement commands received over HTTP.
- Reporting the rover state as plain text (/move) or JSON (/state).

The HTTP server is implemented with Tornado.
"""
