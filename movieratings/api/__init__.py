"""
JSON:API HTTP layer: application factory, middleware, routers and schemas.
"""
