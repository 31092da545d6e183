"""String enumerations used across the Enclave Manager API."""

from enum import Enum


class AccessRoles(str, Enum):
    READER = "READER"
    WRITER = "WRITER"
    MANAGER = "MANAGER"


class AppStatusType(str, Enum):
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"
    UNKNOWN = "UNKNOWN"


class ApprovalStatus(str, Enum):
    APPROVED = "APPROVED"
    DENIED = "DENIED"


class BuildDeploymentStatusType(str, Enum):
    DEPLOYED = "DEPLOYED"
    UNDEPLOYED = "UNDEPLOYED"


class BuildStatusType(str, Enum):
    REJECTED = "REJECTED"
    WHITELISTED = "WHITELISTED"
    PENDING = "PENDING"


class CertificateStatusType(str, Enum):
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    ISSUED = "ISSUED"
    REVOKED = "REVOKED"
    EXPIRED = "EXPIRED"


class ClusterState(str, Enum):
    NOCLUSTER = "NOCLUSTER"
    ZONENODE = "ZONENODE"
    NOZONENODE = "NOZONENODE"
    ERROR = "ERROR"


class EventActionType(str, Enum):
    NODE_STATUS = "NODE_STATUS"
    APP_STATUS = "APP_STATUS"
    USER_APPROVAL = "USER_APPROVAL"
    NODE_ATTESTATION = "NODE_ATTESTATION"
    CERTIFICATE = "CERTIFICATE"
    ADMIN = "ADMIN"
    APP_HEARTBEAT = "APP_HEARTBEAT"
    USER_AUTH = "USER_AUTH"


class EventActorType(str, Enum):
    APP = "APP"
    USER = "USER"
    SYSTEM = "SYSTEM"


class EventSeverity(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class JavaRuntime(str, Enum):
    JAVA_ORACLE = "JAVA-ORACLE"
    OPENJDK = "OPENJDK"
    OPENJ9 = "OPENJ9"
    LIBERTY_JRE = "LIBERTY-JRE"


class NodeStatusType(str, Enum):
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"
    FAILED = "FAILED"
    DEACTIVATED = "DEACTIVATED"
    INPROGRESS = "INPROGRESS"


class OAuthProviderType(str, Enum):
    IBM_APPID = "IBM-APPID"


class RequesterType(str, Enum):
    USER = "USER"
    APP = "APP"
    SYSTEM = "SYSTEM"


class TaskStatusType(str, Enum):
    INPROGRESS = "INPROGRESS"
    FAILED = "FAILED"
    SUCCESS = "SUCCESS"
    DENIED = "DENIED"


class TaskType(str, Enum):
    NODE_ATTESTATION = "NODE_ATTESTATION"
    CERTIFICATE_ISSUANCE = "CERTIFICATE_ISSUANCE"
    BUILD_WHITELIST = "BUILD_WHITELIST"
    DOMAIN_WHITELIST = "DOMAIN_WHITELIST"


class UserAccountStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    DISABLED = "DISABLED"


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    DISABLED = "DISABLED"


class WorkflowObjectType(str, Enum):
    DATASET = "DATASET"
    APPLICATION = "APPLICATION"
    USER = "USER"
