"""
Wall Service
User registry, session slot and post ledger over a StoreProtocol.

Persisted records:
  users           list of User   — the registry
  posts           list of Post   — the ledger, newest physically first
  currentSession  User | absent  — the signed-in user, restored on start

Every public operation returns a Result; WallError never escapes.
In-memory state is only updated after the matching store write succeeded,
so a failed write leaves the service exactly as it was.
"""

import logging
import threading
import time
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import ValidationError

from errors import Result, StorageUnavailable, WallError, WallErrorKind
from models import Post, User
from repositories.base import StoreProtocol

logger = logging.getLogger(__name__)

USERS_KEY = "users"
POSTS_KEY = "posts"
SESSION_KEY = "currentSession"
UNREADABLE_SUFFIX = "_unreadable"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WallService:
    def __init__(
        self,
        store: StoreProtocol,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """
        ``clock`` must return timezone-aware datetimes; ``id_factory`` makes user ids.
        Storage errors while loading propagate to the caller.
        """
        self._store = store
        self._clock = clock or utcnow
        self._new_user_id = id_factory or (lambda: uuid.uuid4().hex)
        self._lock = threading.RLock()

        self._users: list[User] = self._load_list(USERS_KEY, User)
        self._posts: list[Post] = self._load_list(POSTS_KEY, Post)
        self._session: Optional[User] = self._load_session()
        self._last_post_id = max((int(p.id) for p in self._posts if p.id.isdigit()), default=0)

        logger.info(
            "Wall loaded: %d users, %d posts, session=%s",
            len(self._users),
            len(self._posts),
            self._session.username if self._session else None,
        )

    # ── Loading ────────────────────────────────────────────────────────

    def _load_list(self, key: str, model):
        raw = self._store.read(key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("Record %r is not a list; starting empty", key)
            self._preserve(key, raw)
            return []
        items = []
        for entry in raw:
            try:
                items.append(model.model_validate(entry))
            except ValidationError as e:
                logger.warning("Skipping malformed %s entry: %s", key, e)
        if len(items) != len(raw):
            self._preserve(key, raw)
        return items

    def _preserve(self, key: str, raw) -> None:
        """Copy a record the service could not fully load, before a later write drops its entries."""
        backup = f"{key}{UNREADABLE_SUFFIX}"
        self._store.write(backup, raw)
        logger.warning("Original %r record kept as %r", key, backup)

    def _load_session(self) -> Optional[User]:
        raw = self._store.read(SESSION_KEY)
        if raw is None:
            return None
        try:
            user = User.model_validate(raw)
        except ValidationError as e:
            logger.warning("Discarding malformed session record: %s", e)
            user = None
        if user is None or self._registered(user) is None:
            if user is not None:
                logger.warning("Discarding session for %s: not in the registry", user.username)
            self._store.clear(SESSION_KEY)
            return None
        return user

    def _registered(self, user: User) -> Optional[User]:
        return next((u for u in self._users if u.id == user.id and u.username == user.username), None)

    # ── Read accessors ─────────────────────────────────────────────────

    @property
    def current_user(self) -> Optional[User]:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def user_count(self) -> int:
        return len(self._users)

    def username_exists(self, username: str) -> bool:
        with self._lock:
            return any(u.username == username for u in self._users)

    # ── Operations ─────────────────────────────────────────────────────

    def register(self, username: str, first_name: str, last_name: str, password: str) -> Result[User]:
        """Add a user to the registry. Does not sign them in."""
        try:
            for name, value in (
                ("username", username),
                ("first_name", first_name),
                ("last_name", last_name),
                ("password", password),
            ):
                if not isinstance(value, str) or not value.strip():
                    raise WallError(WallErrorKind.INVALID_INPUT, f"'{name}' is required")

            with self._lock:
                if self.username_exists(username):
                    raise WallError(WallErrorKind.DUPLICATE_USERNAME)
                user = User(
                    id=self._new_user_id(),
                    username=username,
                    first_name=first_name,
                    last_name=last_name,
                    password_secret=password,
                    created_at=self._clock(),
                )
                users = self._users + [user]
                self._store.write(USERS_KEY, [u.to_record() for u in users])
                self._users = users
        except WallError as e:
            return self._fail("register", e)

        logger.info("Registered user %s (%s)", user.username, user.id)
        return Result.success(user)

    def sign_in(self, username: str, password: str) -> Result[User]:
        """Open a session for the matching user, replacing any active one."""
        try:
            with self._lock:
                user = next(
                    (u for u in self._users if u.username == username and u.password_secret == password),
                    None,
                )
                if user is None:
                    raise WallError(WallErrorKind.INVALID_CREDENTIALS)
                self._store.write(SESSION_KEY, user.to_record())
                self._session = user
        except WallError as e:
            return self._fail("sign_in", e)

        logger.info("Signed in %s", user.username)
        return Result.success(user)

    def sign_out(self) -> Result[None]:
        try:
            with self._lock:
                previous = self._session
                self._store.clear(SESSION_KEY)
                self._session = None
        except WallError as e:
            return self._fail("sign_out", e)

        if previous is not None:
            logger.info("Signed out %s", previous.username)
        return Result.success(None)

    def create_post(self, content: str) -> Result[Post]:
        try:
            with self._lock:
                author = self._session
                if author is None or self._registered(author) is None:
                    raise WallError(WallErrorKind.NOT_AUTHENTICATED)
                text = content.strip() if isinstance(content, str) else ""
                if not text:
                    raise WallError(WallErrorKind.INVALID_INPUT, "Post content cannot be empty")
                post = Post(
                    id=self._next_post_id(),
                    content=text,
                    author_id=author.id,
                    author_display_name=author.display_name,
                    author_username=author.username,
                    created_at=self._clock(),
                )
                posts = [post] + self._posts
                self._store.write(POSTS_KEY, [p.to_record() for p in posts])
                self._posts = posts
        except WallError as e:
            return self._fail("create_post", e)

        logger.info("Post %s created by %s", post.id, post.author_username)
        return Result.success(post)

    def list_posts(self) -> list[Post]:
        """All posts, newest first. Equal timestamps fall back to id, newest insertion first."""
        with self._lock:
            return sorted(self._posts, key=lambda p: (p.created_at, p.id), reverse=True)

    # ── Internal helpers ───────────────────────────────────────────────

    def _next_post_id(self) -> str:
        candidate = time.time_ns()
        if candidate <= self._last_post_id:
            candidate = self._last_post_id + 1
        self._last_post_id = candidate
        return f"{candidate:020d}"

    def _fail(self, operation: str, err: WallError) -> Result:
        if isinstance(err, StorageUnavailable):
            logger.error("%s failed: %s", operation, err, exc_info=True)
        else:
            logger.warning("%s rejected: %s", operation, err)
        return Result.failure(err)
