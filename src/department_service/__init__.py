"""
Department service: owns department records and serves them under the versioned API path.
It has no outbound dependencies; the user service calls it to enrich user reads.
"""
