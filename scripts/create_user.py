import secrets
import sys
from sqlalchemy.orm import Session
from database.db import SessionLocal
from dependencies.security import hash_token
from models.users import User

def register_user(user_id: str, email: str) -> str:
    """Mirror an auth provider user and issue an API token (printed once, only its hash is kept)."""
    db: Session = SessionLocal()
    token = secrets.token_urlsafe(32)

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        user = User(id=user_id, email=email)
        db.add(user)
    user.email = email
    user.token_hash = hash_token(token)

    db.commit()
    db.close()
    return token

if __name__ == "__main__":
    if len(sys.argv) != 3:
        print("usage: python -m scripts.create_user <user_id> <email>")
        sys.exit(1)
    print(f"✅ token for {sys.argv[2]}: {register_user(sys.argv[1], sys.argv[2])}")
