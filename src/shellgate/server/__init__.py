"""ASGI plumbing: middleware application, response sender, dev server."""
