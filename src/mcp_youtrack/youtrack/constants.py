"""Constants for the YouTrack integration."""

from typing import Final

# Environment variable names
ENV_YOUTRACK_URL: Final[str] = "YOUTRACK_URL"
ENV_YOUTRACK_TOKEN: Final[str] = "YOUTRACK_TOKEN"
ENV_YOUTRACK_SSL_VERIFY: Final[str] = "YOUTRACK_SSL_VERIFY"
ENV_YOUTRACK_TIMEOUT: Final[str] = "YOUTRACK_TIMEOUT"
ENV_YOUTRACK_STATE_FIELD: Final[str] = "YOUTRACK_STATE_FIELD"

# Default values
DEFAULT_SSL_VERIFY: Final[bool] = True
DEFAULT_TIMEOUT: Final[float] = 30.0
DEFAULT_STATE_FIELD: Final[str] = "State"
DEFAULT_OFFSET: Final[int] = 0
DEFAULT_LIMIT: Final[int] = 20
MIN_LIMIT: Final[int] = 1
MAX_LIMIT: Final[int] = 200

# Error bodies are cut to this many characters
ERROR_BODY_LIMIT: Final[int] = 500

TOTAL_COUNT_HEADER: Final[str] = "X-Total-Count"

# Field kind tags ($type) of issue custom field payloads
SINGLE_ENUM_FIELD: Final[str] = "SingleEnumIssueCustomField"
MULTI_ENUM_FIELD: Final[str] = "MultiEnumIssueCustomField"
SINGLE_USER_FIELD: Final[str] = "SingleUserIssueCustomField"
STATE_FIELD: Final[str] = "StateIssueCustomField"

ASSIGNEE_FIELD_NAME: Final[str] = "Assignee"

# Project ids look like "0-12"; anything else is treated as a short name
PROJECT_ENTITY_ID_PATTERN: Final[str] = r"^\d+-\d+$"

# Field selectors, one per response shape the models decode
PROJECT_REF_FIELDS: Final[str] = "id,name,shortName"
USER_FIELDS: Final[str] = "id,login,fullName,email,timezone"
TAG_FIELDS: Final[str] = "id,name,color(background)"
COMMENT_FIELDS: Final[str] = "id,text,author(login,fullName,email),created,updated"
SAVED_SEARCH_FIELDS: Final[str] = "id,name,query,owner(login,fullName,email)"
ISSUE_SEARCH_FIELDS: Final[str] = (
    "id,idReadable,summary,project(id,name,shortName),resolved,"
    "reporter(login,fullName,email),created,updated"
)
ISSUE_DETAIL_FIELDS: Final[str] = (
    "id,idReadable,summary,description,project(id,name,shortName),"
    "reporter(login,fullName,email),tags(id,name,color(background)),votes,"
    "created,updated,resolved,url,"
    "customFields(name,value(name,login,fullName,idReadable,text,presentableName))"
)
ISSUE_CREATED_FIELDS: Final[str] = "id,idReadable,summary,project(id,name,shortName),url"
ISSUE_UPDATED_FIELDS: Final[str] = "id,idReadable,summary,updated,url"
ISSUE_LINK_FIELDS: Final[str] = (
    "linkType(name),direction,issues(idReadable),"
    "linkTypeAggregated(name,issues(size))"
)
CUSTOM_FIELD_SCHEMA_FIELDS: Final[str] = (
    "projectCustomField(field(name,localizedName,fieldType(id)),canBeEmpty,"
    "emptyFieldText,isRequired,defaultValue,bundle(values(id,name,color(background))))"
)
PROJECT_DETAIL_FIELDS: Final[str] = (
    "id,name,shortName,description,leader(login,fullName,email),created,"
    "customFields(projectCustomField(field(name,fieldType(id)),isRequired,canBeEmpty,"
    "emptyFieldText,defaultValue,bundle(values(id,name,color(background)))))"
)
