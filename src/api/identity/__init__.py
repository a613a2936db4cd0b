"""Identity bounded context.

Manages account registration, credential verification, token issuance and
user profile maintenance.
"""
