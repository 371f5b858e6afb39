"""HTTP API for the HTML Obfuscator.

WHY: Other services (static-site builders, CMS hooks, curl scripts) need
to obfuscate pages without shelling out to the CLI.

HOW: app.py defines a FastAPI application; models.py holds the Pydantic
request/response schemas. Obfuscation is fast and pure, so every
endpoint answers synchronously; there is no job queue.
"""
