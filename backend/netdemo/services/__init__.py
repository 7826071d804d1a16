# Services package init
"""
NetDemo — Services Layer
==========================

What:  Demo logic sitting behind the route handlers.
Why:   Routes handle HTTP; services handle parsing, computation and state,
       and can be unit-tested without a client.

Service Inventory:
    - SquareService:    `num` header parsing, bound check, squaring
    - UsersService:     fixed user listing and its JSON encoding
    - IncrementService: /incr body decoding and counter mutation
    - Counter:          the in-memory counter itself
"""
