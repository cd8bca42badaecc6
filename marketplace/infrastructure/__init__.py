"""
Infrastructure layer for the freelance marketplace.

This layer contains the implementation details for external systems integration:
- Document database (Supabase tables or in-memory)
- Authentication (Supabase Auth social sign-in)
- File Storage (Supabase Storage or in-memory)

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
