"""Building blocks shared by every layer of the identity service.

Currently holds the tagged ``Result`` type used to return expected
failures as values.
"""
