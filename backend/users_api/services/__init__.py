"""Services Layer — request handlers orchestrating core rules and store calls.

Invariants:
    - Services receive their repository through the constructor
    - Services raise UsersApiError subclasses; HTTP mapping happens in api/
"""
