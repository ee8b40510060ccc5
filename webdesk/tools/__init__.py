"""
HTTP routes for the Webdesk file server.
"""
