"""
Naming convention checks for serverless services.

- casing: kebab / camel case helpers
- rules: pure checks returning violation messages
- validator: rule registry and the aggregate validation pass
- plugin: host lifecycle and command wiring
"""
