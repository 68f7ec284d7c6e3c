from models.component import ComponentRecord
from models.summary import ComponentResult, AttendanceSummary
