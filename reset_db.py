# reset_db.py
# Drops and recreates every InkScore table. Destroys all stored analyses.
from inkscore.models import database
from inkscore.models import *  # registers all models
from inkscore.models.database import engine

if __name__ == "__main__":
    tables = ", ".join(sorted(database.Base.metadata.tables))
    print(f"⚠️ Dropping InkScore tables: {tables}")
    database.Base.metadata.drop_all(bind=engine)

    print("✅ Recreating users, checkins, snapshots and profiles...")
    database.Base.metadata.create_all(bind=engine)
