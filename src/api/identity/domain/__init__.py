"""Domain layer for the identity context.

Contains the User aggregate and its value objects. Has no dependency on
application services or infrastructure.
"""
