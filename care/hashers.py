"""
Password hashing.

Django's bcrypt hasher defaults to 12 rounds; accounts here are hashed
with a fixed cost of 10.
"""
from django.contrib.auth.hashers import BCryptPasswordHasher as _BCryptPasswordHasher


class BCryptPasswordHasher(_BCryptPasswordHasher):
    rounds = 10
