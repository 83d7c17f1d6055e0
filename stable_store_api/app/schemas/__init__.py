"""
Pydantic schema definitions for API payloads.

Each resource kind (staking entries, skill records, donations,
horoscopes, products) defines a create model, a partial update model
and the stored record model.  All records share the envelope defined
in ``record``.
"""
