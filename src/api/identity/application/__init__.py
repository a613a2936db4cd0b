"""Application layer for the identity context.

Use-case handlers orchestrate the User aggregate and the credential
capabilities, translating every failure into an ``OperationResult``.
"""
