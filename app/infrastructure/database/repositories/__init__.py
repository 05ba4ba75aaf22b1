"""SQLAlchemy-backed repository implementations.

Import the concrete repositories from their modules
(``app.infrastructure.database.repositories.account_repository`` and so on);
they depend on the domain models, so this package stays import-free.
"""
