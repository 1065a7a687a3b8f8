from app.core.security import verify_password
from app.models.enlaces import Video
from app.models.posts import PostType
from app.models.usuarios import User
from app.services.seed import ADMIN_EMAIL, run_seed


def test_seed_creates_base_data(db):
    created = run_seed(db)
    assert created == {"post_types": 3, "admin": True, "videos": 4}

    assert sorted(pt.name for pt in db.query(PostType).all()) == ["blog", "comunicado", "evento"]
    admin = db.query(User).filter(User.email == ADMIN_EMAIL).one()
    assert admin.is_admin is True
    assert verify_password("admin123", admin.password_hash)
    assert db.query(Video).filter(Video.pagina == "blog").count() == 3


def test_seed_is_idempotent(db):
    run_seed(db)
    again = run_seed(db)
    assert again == {"post_types": 0, "admin": False, "videos": 0}
    assert db.query(User).count() == 1
    assert db.query(Video).count() == 4


def test_seeded_admin_can_login(client, db):
    run_seed(db)
    res = client.post(
        "/prisma/login",
        json={"email": "admin@mail.com", "password": "admin123"},
        headers={"x-api-key": "test-api-key-12345"},
    )
    assert res.status_code == 200
    assert res.json()["token"]
