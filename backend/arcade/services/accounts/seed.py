from arcade.models import User

ADMIN_ID = 'admin-001'


def seed_admin(db, bcrypt, config):
    """Create the administrator account if it does not exist yet.

    Level 99 with experience 98000 keeps ``level == experience // 1000 + 1``.
    """
    if db.session.get(User, ADMIN_ID) is not None:
        return None
    admin = User(
        id=ADMIN_ID,
        username=config.get('ADMIN_USERNAME', 'admin'),
        email=config.get('ADMIN_EMAIL', 'admin@ashura.games'),
        password_hash=bcrypt.generate_password_hash(config.get('ADMIN_PASSWORD', 'admin123')).decode('utf-8'),
        level=99,
        experience=98000,
        coins=999999,
        achievements=['admin_access', 'first_login', 'game_master'],
        is_admin=True,
    )
    db.session.add(admin)
    db.session.commit()
    return admin
