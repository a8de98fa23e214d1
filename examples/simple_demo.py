"""Simple demo: build a SQLite database and generate factories for it."""

import sqlite3
import os
from pathlib import Path

from factorygen.core.config import Settings
from factorygen.core.database import DatabaseConnection, DatabaseConfig
from factorygen.core.generator import FactoryGenerator
from factorygen.core.models import GenerationRequest


def create_simple_demo_db(db_path: str = "simple_demo.db"):
    """Create a simple demo database."""

    # Remove existing database
    if os.path.exists(db_path):
        os.remove(db_path)

    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE users (
            id int(11) PRIMARY KEY,
            name varchar(100) NOT NULL,
            email varchar(255) NOT NULL,
            created_at datetime
        )
    """)

    cursor.execute("""
        CREATE TABLE blog_posts (
            id bigint PRIMARY KEY,
            user_id int(11) NOT NULL,
            title varchar(200) NOT NULL,
            body text,
            published tinyint(1) DEFAULT 0,
            created_at datetime,
            FOREIGN KEY (user_id) REFERENCES users(id)
        )
    """)

    conn.commit()
    conn.close()
    print(f"✅ Demo database created: {db_path}")


def main():
    base_path = Path("demo_project")
    db_path = base_path / "demo.db"
    base_path.mkdir(exist_ok=True)
    create_simple_demo_db(str(db_path))

    settings = Settings(namespace_model="demo.models", ignored_columns=["id"])
    with DatabaseConnection(DatabaseConfig(driver="sqlite", database=str(db_path))) as db_conn:
        generator = FactoryGenerator(db_conn, settings, base_path)
        for result in generator.run(GenerationRequest(generate_all=True)):
            print(f"  • {result.table}: {result.factory_name} ({result.status.value}) -> {result.path}")


if __name__ == "__main__":
    main()
