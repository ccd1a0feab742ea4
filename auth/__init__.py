"""
auth — user credentials.

Provides:
  • ``UserRecord`` / ``AccountType`` — what the credential store holds
  • Password salting, hashing and verification (bcrypt)
"""
