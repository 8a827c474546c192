from fastapi import APIRouter
from qds.api.routes import (
    analytics, auth, blog, careers, contact, job_applications, portfolio, services, testimonials
)

api_router = APIRouter()

# Public website routes
api_router.include_router(contact.router)
api_router.include_router(portfolio.router)
api_router.include_router(services.router)
api_router.include_router(testimonials.router)
api_router.include_router(blog.router)
api_router.include_router(careers.router)
api_router.include_router(job_applications.router)
api_router.include_router(analytics.router)

# Admin session (unguarded) and the guarded admin area
api_router.include_router(auth.router)
api_router.include_router(contact.admin_router)
api_router.include_router(portfolio.admin_router)
api_router.include_router(services.admin_router)
api_router.include_router(testimonials.admin_router)
api_router.include_router(blog.admin_router)
api_router.include_router(careers.admin_router)
api_router.include_router(job_applications.admin_router)
api_router.include_router(analytics.admin_router)
