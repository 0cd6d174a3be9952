"""
HTTP API for the movie catalog: application factory, routers, schemas,
validation, CORS policy and error handling.
"""
