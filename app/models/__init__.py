from .user import User
from .school import School, SchoolOption
from .student import Student, StudentTestResult, StudentProgress
from .question import EvaluationQuestion, StudentCustomAnswer
from .booking import Booking, ConsultationBooking
from .submission import ContactSubmission, NewsletterSubscription, WaitlistEntry
from .content import Product, Service
