"""Tool names, access levels and user roles understood by the server."""

from enum import Enum

# Tool names as they appear in the tools definition file.
TOOL_CREATE_ENVIRONMENT_GROUP = "createEnvironmentGroup"
TOOL_LIST_ENVIRONMENT_GROUPS = "listEnvironmentGroups"
TOOL_UPDATE_ENVIRONMENT_GROUP = "updateEnvironmentGroup"
TOOL_CREATE_ACCESS_GROUP = "createAccessGroup"
TOOL_LIST_ACCESS_GROUPS = "listAccessGroups"
TOOL_UPDATE_ACCESS_GROUP = "updateAccessGroup"
TOOL_ADD_ENVIRONMENT_TO_ACCESS_GROUP = "addEnvironmentToAccessGroup"
TOOL_REMOVE_ENVIRONMENT_FROM_ACCESS_GROUP = "removeEnvironmentFromAccessGroup"
TOOL_LIST_ENVIRONMENTS = "listEnvironments"
TOOL_UPDATE_ENVIRONMENT = "updateEnvironment"
TOOL_GET_STACK_FILE = "getStackFile"
TOOL_CREATE_STACK = "createStack"
TOOL_LIST_STACKS = "listStacks"
TOOL_UPDATE_STACK = "updateStack"
TOOL_CREATE_ENVIRONMENT_TAG = "createEnvironmentTag"
TOOL_LIST_ENVIRONMENT_TAGS = "listEnvironmentTags"
TOOL_CREATE_TEAM = "createTeam"
TOOL_LIST_TEAMS = "listTeams"
TOOL_UPDATE_TEAM_NAME = "updateTeamName"
TOOL_UPDATE_TEAM_MEMBERS = "updateTeamMembers"
TOOL_LIST_USERS = "listUsers"
TOOL_UPDATE_USER_ROLE = "updateUserRole"
TOOL_GET_SETTINGS = "getSettings"
TOOL_UPDATE_ACCESS_GROUP_NAME = "updateAccessGroupName"
TOOL_UPDATE_ACCESS_GROUP_USER_ACCESSES = "updateAccessGroupUserAccesses"
TOOL_UPDATE_ACCESS_GROUP_TEAM_ACCESSES = "updateAccessGroupTeamAccesses"
TOOL_UPDATE_ENVIRONMENT_TAGS = "updateEnvironmentTags"
TOOL_UPDATE_ENVIRONMENT_USER_ACCESSES = "updateEnvironmentUserAccesses"
TOOL_UPDATE_ENVIRONMENT_TEAM_ACCESSES = "updateEnvironmentTeamAccesses"
TOOL_UPDATE_ENVIRONMENT_GROUP_NAME = "updateEnvironmentGroupName"
TOOL_UPDATE_ENVIRONMENT_GROUP_ENVIRONMENTS = "updateEnvironmentGroupEnvironments"
TOOL_UPDATE_ENVIRONMENT_GROUP_TAGS = "updateEnvironmentGroupTags"
TOOL_DOCKER_PROXY = "dockerProxy"
TOOL_KUBERNETES_PROXY = "kubernetesProxy"


class AccessLevel(str, Enum):
    """Access level granted to a user or team on an environment."""

    ENVIRONMENT_ADMIN = "environment_administrator"
    HELPDESK_USER = "helpdesk_user"
    STANDARD_USER = "standard_user"
    READONLY_USER = "readonly_user"
    OPERATOR_USER = "operator_user"


class UserRole(str, Enum):
    """Role of a Portainer user."""

    ADMIN = "admin"
    USER = "user"
    EDGE_ADMIN = "edge_admin"


ALL_ACCESS_LEVELS = tuple(level.value for level in AccessLevel)
ALL_USER_ROLES = tuple(role.value for role in UserRole)


def is_valid_access_level(access):
    """Return True if ``access`` names a known access level."""
    return isinstance(access, str) and access in ALL_ACCESS_LEVELS


def is_valid_user_role(role):
    """Return True if ``role`` names a known user role."""
    return isinstance(role, str) and role in ALL_USER_ROLES