"""
Use cases for the Person API.

Services validate input and orchestrate repositories. Routers and scripts
should call these services instead of touching a repository directly.
"""
