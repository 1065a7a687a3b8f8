import getpass

from sqlalchemy import text

from app.core.security import hash_password
from app.db.session import get_engine


def main():
    engine = get_engine()

    email = input("Email admin: ").strip().lower()
    username = input("Username admin: ").strip()
    password = getpass.getpass("Password admin: ").strip()

    if not email or not username or not password:
        print("Email, username y password son requeridos.")
        return

    pw_hash = hash_password(password)

    with engine.begin() as conn:
        # Si ya existe, no lo duplica
        exists = conn.execute(
            text("SELECT 1 FROM users WHERE lower(email)=lower(:e) LIMIT 1"),
            {"e": email},
        ).fetchone()

        if exists:
            print("Ese email ya existe. Usa reset_password.py para cambiar la contraseña.")
            return

        conn.execute(
            text("""
                INSERT INTO users (username, email, password_hash, is_admin)
                VALUES (:u, :e, :h, TRUE)
            """),
            {"u": username, "e": email, "h": pw_hash},
        )

    print("OK: admin creado:", email)

if __name__ == "__main__":
    main()
