"""Simple migration runner applying the SQL files in migrations/<dialect>/"""
from pathlib import Path

BASE = Path(__file__).parent
MIGRATIONS_DIR = BASE / "migrations"


def migrations_for(dialect: str):
    """Return the migration files for `dialect` in lexical order."""
    return sorted((MIGRATIONS_DIR / dialect).glob("*.sql"))


def _statements(sql: str):
    return [s.strip() for s in sql.split(";") if s.strip()]


def run(engine=None):
    """Execute SQL migration files against the configured database.

    The function applies every `migrations/<dialect>/*.sql` file in
    lexical order inside one transaction and returns the applied file
    names. Use it together with `DB_SCHEMA_POLICY=none` or `validate`.
    """
    if engine is None:
        from tutorials.database import engine
    dialect = engine.dialect.name
    files = migrations_for(dialect)
    if not files:
        raise RuntimeError(f"no migrations found for dialect {dialect!r} in {MIGRATIONS_DIR}")
    print("Using database:", engine.url.render_as_string(hide_password=True))
    applied = []
    with engine.begin() as conn:
        for m in files:
            print("Applying:", m.name)
            for stmt in _statements(m.read_text(encoding="utf-8")):
                conn.exec_driver_sql(stmt)
            applied.append(m.name)
    print("Migrations applied.")
    return applied


if __name__ == '__main__':
    run()
