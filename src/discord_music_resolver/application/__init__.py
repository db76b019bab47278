"""
Application Layer

Contains the resolution use cases and the ports they depend on.

Structure:
- services/: Search and resolver services, option models
- interfaces/: Port interfaces for infrastructure adapters
"""
