import getpass

from sqlalchemy import text

from app.core.security import hash_password
from app.db.session import get_engine


def main():
    engine = get_engine()

    email = input("Email a resetear: ").strip().lower()
    new_pw = getpass.getpass("Nueva contraseña: ").strip()
    if not new_pw:
        print("La contraseña no puede estar vacía.")
        return

    new_hash = hash_password(new_pw)

    with engine.begin() as conn:
        r = conn.execute(
            text(
                "UPDATE users "
                "SET password_hash = :h "
                "WHERE lower(email) = lower(:e)"
            ),
            {"h": new_hash, "e": email},
        )
        if r.rowcount == 0:
            print("No existe ese email en la tabla users.")
        else:
            print("OK: contraseña actualizada para", email)


if __name__ == "__main__":
    main()
