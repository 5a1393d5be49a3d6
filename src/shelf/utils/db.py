from protean.domain import Domain
from sqlalchemy import create_engine

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in SQL_PROVIDERS:
            yield provider


def setup_db(domain: Domain) -> list[str]:
    """Create tables for every SQL-backed provider. Returns the provider names touched."""
    touched = []
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])

            # Accessing _dao registers the aggregate's model with SQLAlchemy.
            for _, aggregate_record in domain.registry.aggregates.items():
                if aggregate_record.cls.meta_.provider == provider.name:
                    domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

            provider._metadata.create_all(engine)
            touched.append(provider.name)
    return touched


def drop_db(domain: Domain) -> list[str]:
    """Drop tables for every SQL-backed provider. Returns the provider names touched."""
    touched = []
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
            touched.append(provider.name)
    return touched
