from qds.schemas.common import LocalizedText, LocalizedList
from qds.schemas.contact import ContactSubmissionCreate, ContactSubmissionResponse
from qds.schemas.portfolio import (
    PortfolioProjectCreate, PortfolioProjectUpdate, PortfolioProjectResponse
)
from qds.schemas.service import ServiceCreate, ServiceUpdate, ServiceResponse
from qds.schemas.testimonial import TestimonialCreate, TestimonialUpdate, TestimonialResponse
from qds.schemas.blog import BlogPostCreate, BlogPostUpdate, BlogPostResponse
from qds.schemas.career import CareerCreate, CareerUpdate, CareerResponse
from qds.schemas.application import (
    JobApplicationCreate, JobApplicationStatusUpdate, JobApplicationResponse
)
from qds.schemas.analytics import AnalyticsResponse, AnalyticsSummary, TrackResponse
from qds.schemas.auth import LoginRequest, LoginResponse, AdminStatusResponse
