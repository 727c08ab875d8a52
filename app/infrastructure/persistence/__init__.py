"""SQL persistence: engine, models, repositories, migrations."""
