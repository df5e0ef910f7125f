# app/config.py

from sqlalchemy.engine import URL

DB_HOST = "mysql"  # service name in the cluster
DB_USER = "root"
DB_PASSWORD = "password"
DB_NAME = "testdb"

USERS_TABLE = "users"

HOST = "0.0.0.0"
PORT = 5000


def database_url() -> URL:
    return URL.create(
        "mysql+pymysql",
        username=DB_USER,
        password=DB_PASSWORD,
        host=DB_HOST,
        database=DB_NAME,
    )
