from qds.models.common import Localized
from qds.models.contact import ContactSubmission
from qds.models.portfolio import PortfolioProject
from qds.models.service import Service
from qds.models.testimonial import Testimonial
from qds.models.blog import BlogPost
from qds.models.career import Career, CareerStatus
from qds.models.application import JobApplication, ApplicationStatus
from qds.models.analytics import Analytics, Counter
from qds.models.admin_session import AdminSession
