"""
Request and response models for the Enclave Manager API.

Models mirror the service's JSON schema. Field aliases carry the wire names
where they differ from Python naming.
"""

from .base import ByteArray, EmModel
from .enums import (
    AccessRoles,
    AppStatusType,
    ApprovalStatus,
    BuildDeploymentStatusType,
    BuildStatusType,
    CertificateStatusType,
    ClusterState,
    EventActionType,
    EventActorType,
    EventSeverity,
    JavaRuntime,
    NodeStatusType,
    OAuthProviderType,
    RequesterType,
    TaskStatusType,
    TaskType,
    UserAccountStatus,
    UserStatus,
    WorkflowObjectType,
)
from .common import (
    AdvancedSettings,
    CaCertificateConfig,
    CertificateConfig,
    DockerInfo,
    EnclaveInfo,
    SearchMetadata,
)
from .accounts import (
    Account,
    AccountListResponse,
    AccountRequest,
    AccountUpdateRequest,
)
from .tools import (
    AuthConfig,
    ConversionRequest,
    ConversionResponse,
    SdkmsSigningKeyConfig,
    SigningKeyConfig,
)
from .certificates import Certificate, CertificateDetails, NewCertificateRequest
from .builds import (
    Build,
    BuildDeploymentStatus,
    BuildStatus,
    ConvertAppBuildRequest,
    CreateBuildRequest,
    GetAllBuildsResponse,
)
from .apps import (
    App,
    AppBodyUpdateRequest,
    AppNodeInfo,
    AppRequest,
    AppStatus,
    AppUpdateRequest,
    GetAllAppsResponse,
    GetAllBuildDeploymentsResponse,
)
from .nodes import (
    AttestationRequest,
    GetAllNodesResponse,
    Node,
    NodeProvisionRequest,
    NodeStatus,
    NodeUpdateRequest,
    SgxInfo,
)
from .tasks import (
    ApprovalInfo,
    GetAllTasksResponse,
    RequesterInfo,
    Task,
    TaskResult,
    TaskStatus,
    TaskUpdateRequest,
)
from .users import (
    ConfirmEmailRequest,
    ConfirmEmailResponse,
    ForgotPasswordRequest,
    GetAllUsersResponse,
    InviteUserRequest,
    PasswordChangeRequest,
    PasswordResetRequest,
    ProcessInviteRequest,
    SignupRequest,
    UpdateUserRequest,
    User,
    UserBlacklistRequest,
    ValidateTokenRequest,
    ValidateTokenResponse,
)
from .zones import AddZoneRequest, Zone, ZoneJoinToken
from .system import AuditLog, AuthResponse, GetAuditLogsResponse, VersionResponse
from .app_configs import (
    ApplicationConfig,
    ApplicationConfigContents,
    ApplicationConfigResponse,
    GetAllApplicationConfigsResponse,
    HashedConfig,
    RuntimeAppConfig,
    UpdateApplicationConfigRequest,
)
from .workflows import (
    CreateFinalWorkflowGraph,
    CreateWorkflowGraph,
    CreateWorkflowVersionRequest,
    FinalWorkflow,
    GetAllFinalWorkflowGraphsResponse,
    GetAllWorkflowGraphsResponse,
    UpdateWorkflowGraph,
    VersionInFinalWorkflow,
    WorkflowEdge,
    WorkflowGraph,
    WorkflowLink,
    WorkflowMetadata,
    WorkflowObject,
)

__all__ = [
    "ByteArray",
    "EmModel",
    # Enums
    "AccessRoles",
    "AppStatusType",
    "ApprovalStatus",
    "BuildDeploymentStatusType",
    "BuildStatusType",
    "CertificateStatusType",
    "ClusterState",
    "EventActionType",
    "EventActorType",
    "EventSeverity",
    "JavaRuntime",
    "NodeStatusType",
    "OAuthProviderType",
    "RequesterType",
    "TaskStatusType",
    "TaskType",
    "UserAccountStatus",
    "UserStatus",
    "WorkflowObjectType",
    # Shared
    "AdvancedSettings",
    "CaCertificateConfig",
    "CertificateConfig",
    "DockerInfo",
    "EnclaveInfo",
    "SearchMetadata",
    # Accounts
    "Account",
    "AccountListResponse",
    "AccountRequest",
    "AccountUpdateRequest",
    # Tools
    "AuthConfig",
    "ConversionRequest",
    "ConversionResponse",
    "SdkmsSigningKeyConfig",
    "SigningKeyConfig",
    # Certificates
    "Certificate",
    "CertificateDetails",
    "NewCertificateRequest",
    # Builds
    "Build",
    "BuildDeploymentStatus",
    "BuildStatus",
    "ConvertAppBuildRequest",
    "CreateBuildRequest",
    "GetAllBuildsResponse",
    # Apps
    "App",
    "AppBodyUpdateRequest",
    "AppNodeInfo",
    "AppRequest",
    "AppStatus",
    "AppUpdateRequest",
    "GetAllAppsResponse",
    "GetAllBuildDeploymentsResponse",
    # Nodes
    "AttestationRequest",
    "GetAllNodesResponse",
    "Node",
    "NodeProvisionRequest",
    "NodeStatus",
    "NodeUpdateRequest",
    "SgxInfo",
    # Tasks
    "ApprovalInfo",
    "GetAllTasksResponse",
    "RequesterInfo",
    "Task",
    "TaskResult",
    "TaskStatus",
    "TaskUpdateRequest",
    # Users
    "ConfirmEmailRequest",
    "ConfirmEmailResponse",
    "ForgotPasswordRequest",
    "GetAllUsersResponse",
    "InviteUserRequest",
    "PasswordChangeRequest",
    "PasswordResetRequest",
    "ProcessInviteRequest",
    "SignupRequest",
    "UpdateUserRequest",
    "User",
    "UserBlacklistRequest",
    "ValidateTokenRequest",
    "ValidateTokenResponse",
    # Zones
    "AddZoneRequest",
    "Zone",
    "ZoneJoinToken",
    # System
    "AuditLog",
    "AuthResponse",
    "GetAuditLogsResponse",
    "VersionResponse",
    # Application configs
    "ApplicationConfig",
    "ApplicationConfigContents",
    "ApplicationConfigResponse",
    "GetAllApplicationConfigsResponse",
    "HashedConfig",
    "RuntimeAppConfig",
    "UpdateApplicationConfigRequest",
    # Workflows
    "CreateFinalWorkflowGraph",
    "CreateWorkflowGraph",
    "CreateWorkflowVersionRequest",
    "FinalWorkflow",
    "GetAllFinalWorkflowGraphsResponse",
    "GetAllWorkflowGraphsResponse",
    "UpdateWorkflowGraph",
    "VersionInFinalWorkflow",
    "WorkflowEdge",
    "WorkflowGraph",
    "WorkflowLink",
    "WorkflowMetadata",
    "WorkflowObject",
]
