"""Constants and small query helpers shared by the test modules."""

PUBLIC_KEY = "-----BEGIN PUBLIC KEY-----MFkwEwYHKoZIzj0CAQ-----END PUBLIC KEY-----"
CIPHERTEXT = "b64:U2FsdGVkX1+9c2VjcmV0"


def count_rows(conn, table: str) -> int:
    return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
