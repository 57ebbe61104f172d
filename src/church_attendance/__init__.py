"""Church attendance package.

Organized by feature modules (members, events, attendance, guests, ...) with a
thin Flask controller layer on top of service/repository layers, plus a client
gateway that degrades to an in-process mirror store when the API is down.
"""
