"""UrbanShield authentication client

Login and signup flows for the UrbanShield mobile backend: input
validation, form submission, response interpretation and role routing.
"""

__version__ = "0.1.0"
