"""
User service: owns user records and enriches single-user reads with the referenced department,
fetched from the department service with the caller's trace id forwarded.
"""
