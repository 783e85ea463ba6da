# SQLModel definitions: imported here to ensure metadata is populated for Alembic.
from .base import IntIdMixin, CreatedAtMixin  # noqa: F401
from .organization import Organization  # noqa: F401
from .user import User  # noqa: F401
from .employee import Employee  # noqa: F401
from .team import Team  # noqa: F401
from .assignments import EmployeeTeam  # noqa: F401
from .log import Log  # noqa: F401
