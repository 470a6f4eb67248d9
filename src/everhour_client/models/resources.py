"""Resource shapes returned by the Everhour API.

These are typed dictionaries describing the decoded JSON exactly as the
service sends it, camelCase keys included. They are annotations only:
responses are not validated against them at runtime.
"""

from typing import Literal, NotRequired, TypedDict

# ============================================================================
# Enumerations
# ============================================================================

AssignmentType = Literal["project", "time-off"]
BillingType = Literal["non_billable", "hourly", "fixed_fee"]
BudgetType = Literal["money", "time"]
InvoiceStatusType = Literal["draft", "sent", "paid"]
PeriodType = Literal["general", "monthly", "weekly", "daily"]
ProjectStatusType = Literal["open", "archived"]
ProjectType = Literal["board", "list"]
RateType = Literal["project_rate", "user_rate", "user_cost"]
SectionStatusType = Literal["open", "archived"]
TaskEstimateType = Literal["overall", "users"]
TaskStatusType = Literal["open", "closed"]
TimecardActionType = Literal["clock-in", "clock-out", "break"]
TimecardTriggerType = Literal["manually", "timer", "button", "day-end", "idle-state"]
TimeRecordAction = Literal["TIMER", "ADD", "EDIT", "REMOVE", "COMMENT", "MOVE"]
TimerStatusType = Literal["active", "stopped"]
UserRoleType = Literal["admin", "supervisor", "member"]
UserStatusType = Literal["active", "invited", "pending", "removed"]
WebhookEventType = Literal[
    "api:project:created",
    "api:project:updated",
    "api:project:removed",
    "api:task:created",
    "api:task:updated",
    "api:task:removed",
    "api:timer:started",
    "api:timer:stopped",
    "api:time:updated",
    "api:section:created",
    "api:section:updated",
    "api:section:removed",
    "api:client:created",
    "api:client:updated",
    "api:estimate:updated",
]

# Per-user values keyed by user id, e.g. estimates or rate overrides
UserSpecificValue = dict[str, float]

# ============================================================================
# Users
# ============================================================================


class User(TypedDict):
    id: int
    name: str
    role: UserRoleType
    status: UserStatusType
    avatarUrl: NotRequired[str]
    headline: NotRequired[str]


# ============================================================================
# Clients and budgets
# ============================================================================


class Budget(TypedDict):
    """Client or project budget.

    ``budget`` is in cents for money budgets and seconds for time budgets.
    """

    budget: int
    period: PeriodType
    type: BudgetType
    appliedFrom: NotRequired[str]
    disallowOverbudget: NotRequired[bool]
    excludeExpenses: NotRequired[bool]
    excludeUnbillableTime: NotRequired[bool]
    progress: NotRequired[int]
    threshold: NotRequired[int]


class Client(TypedDict):
    id: int
    name: str
    projects: list[str]
    budget: NotRequired[Budget]
    businessDetails: NotRequired[str]


# ============================================================================
# Projects, sections and tasks
# ============================================================================


class ProjectBilling(TypedDict):
    type: BillingType
    fee: NotRequired[int]


class BillingRate(TypedDict):
    type: RateType
    rate: NotRequired[int]
    userCostOverrides: NotRequired[UserSpecificValue]
    userRateOverrides: NotRequired[UserSpecificValue]


class Project(TypedDict):
    id: str
    name: str
    billing: NotRequired[ProjectBilling]
    budget: NotRequired[Budget]
    client: NotRequired[int]
    favorite: NotRequired[bool]
    rate: NotRequired[BillingRate]
    type: NotRequired[ProjectType]
    users: NotRequired[list[int]]
    workspaceId: NotRequired[str]
    workspaceName: NotRequired[str]


class Section(TypedDict):
    id: int
    name: str
    position: int
    project: str
    status: NotRequired[SectionStatusType]


class TaskAttributes(TypedDict, total=False):
    client: str
    priority: str


class TaskEstimate(TypedDict):
    total: int
    type: TaskEstimateType
    users: NotRequired[UserSpecificValue]


class TaskMetrics(TypedDict, total=False):
    efforts: int
    expenses: int


class TaskTime(TypedDict):
    total: int
    users: NotRequired[UserSpecificValue]


class Task(TypedDict):
    id: str
    name: str
    projects: list[str]
    attributes: NotRequired[TaskAttributes]
    description: NotRequired[str]
    dueAt: NotRequired[str]
    estimate: NotRequired[TaskEstimate]
    labels: NotRequired[list[str]]
    metrics: NotRequired[TaskMetrics]
    position: NotRequired[int]
    section: NotRequired[int]
    status: NotRequired[TaskStatusType]
    time: NotRequired[TaskTime]
    unbillable: NotRequired[bool]


# ============================================================================
# Time tracking
# ============================================================================


class TimeHistory(TypedDict):
    id: int
    action: TimeRecordAction
    createdBy: int
    previousTime: int
    time: int
    createdAt: NotRequired[str]


class UserTimeRecord(TypedDict):
    id: int
    date: str
    time: int
    user: int
    comment: NotRequired[str]
    isInvoiced: NotRequired[bool]
    isLocked: NotRequired[bool]
    task: NotRequired[Task]


class TimeRecord(UserTimeRecord):
    history: NotRequired[list[TimeHistory]]


class Timer(TypedDict):
    status: TimerStatusType
    comment: NotRequired[str]
    duration: NotRequired[int]
    startedAt: NotRequired[str]
    task: NotRequired[Task]
    today: NotRequired[int]
    user: NotRequired[User]
    userDate: NotRequired[str]


class TimecardHistory(TypedDict, total=False):
    action: TimecardActionType
    previousTime: str
    time: str
    trigger: TimecardTriggerType


class Timecard(TypedDict, total=False):
    breakTime: int
    clockIn: str
    clockOut: str
    history: list[TimecardHistory]
    user: int
    workTime: int


# ============================================================================
# Invoices
# ============================================================================


class RateAdjustment(TypedDict, total=False):
    amount: int
    rate: float


class InvoiceItem(TypedDict, total=False):
    id: int
    billedTime: int
    createdAt: str
    custom: bool
    listAmount: int
    name: str
    netAmount: int
    position: int
    taxable: int
    totalAmount: int


class Invoice(TypedDict):
    id: int
    client: Client
    createdAt: str
    createdBy: User
    status: InvoiceStatusType
    dateFrom: NotRequired[str]
    dateTill: NotRequired[str]
    discount: NotRequired[RateAdjustment]
    dueDate: NotRequired[str]
    expenseMask: NotRequired[str]
    includeExpenses: NotRequired[bool]
    includeTime: NotRequired[bool]
    invoiceItems: NotRequired[list[InvoiceItem]]
    issueDate: NotRequired[str]
    limitDateFrom: NotRequired[str]
    limitDateTill: NotRequired[str]
    listAmount: NotRequired[int]
    netAmount: NotRequired[int]
    projects: NotRequired[list[str]]
    publicId: NotRequired[str]
    tax: NotRequired[RateAdjustment]
    timeMask: NotRequired[str]
    totalAmount: NotRequired[int]
    totalTime: NotRequired[int]


# ============================================================================
# Expenses and attachments
# ============================================================================


class AttachmentDetails(TypedDict, total=False):
    id: int
    name: str
    token: str


class Expense(TypedDict):
    id: int
    amount: NotRequired[int]
    attachments: NotRequired[list[AttachmentDetails]]
    billable: NotRequired[bool]
    category: NotRequired[int]
    date: NotRequired[str]
    details: NotRequired[str]
    project: NotRequired[str]
    quantity: NotRequired[float]
    user: NotRequired[int]


class ExpenseCategory(TypedDict, total=False):
    id: int
    color: str
    name: str
    unitBased: bool
    unitName: str
    unitPrice: int


# ============================================================================
# Resource planner and webhooks
# ============================================================================


class Assignment(TypedDict, total=False):
    id: str
    days: int
    endDate: str
    project: str
    startDate: str
    time: str
    type: AssignmentType
    user: str


class Webhook(TypedDict):
    id: int
    createdAt: str
    events: list[WebhookEventType]
    lastUsedAt: str
    targetUrl: str
    isActive: NotRequired[bool]
    project: NotRequired[str]


# ============================================================================
# Reports
# ============================================================================


class CommonMetrics(TypedDict, total=False):
    """Metrics shared by all dashboard rows. Money in cents, time in seconds."""

    billableAmount: int
    billableAmountExpenses: int
    billableAmountTime: int
    billableExpenses: int
    billableTime: int
    costs: int
    costsExpenses: int
    costsTime: int
    expenses: int
    nonBillableTime: int
    profit: int
    profitCosts: int
    separateExpenses: int
    time: int
    timerTimePc: int
    uninvoicedAmount: int


class ClientsDashboardItem(CommonMetrics, total=False):
    clientId: int
    clientName: str


class ProjectsDashboardItem(CommonMetrics, total=False):
    billingType: BillingType
    clientId: int
    clientName: str
    projectId: str
    projectName: str
    projectStatus: ProjectStatusType
    workspaceId: str
    workspaceName: str


class UsersDashboardItem(CommonMetrics, total=False):
    costsTimeOff: int
    memberAvatarUrl: str
    memberHeadline: str
    memberId: int
    memberName: str
    memberStatus: UserStatusType
    timeOffDays: int
    timeOffTime: int


class ExportProject(TypedDict):
    id: str
    name: str
    workspace: NotRequired[str]


class ExportTask(TypedDict):
    id: str
    name: str
    dueAt: NotRequired[str]
    iteration: NotRequired[str]
    number: NotRequired[int]
    status: NotRequired[str]
    type: NotRequired[str]


class ExportUser(TypedDict):
    id: int
    name: str


class EstimateExportObject(TypedDict, total=False):
    estimate: TaskEstimate
    project: ExportProject
    task: ExportTask
    time: TaskTime


class TimeExportObject(TypedDict):
    time: int
    date: NotRequired[str]
    project: NotRequired[ExportProject]
    task: NotRequired[ExportTask]
    user: NotRequired[ExportUser]
