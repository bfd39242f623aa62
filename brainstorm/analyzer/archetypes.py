"""Static analysis templates, one per archetype."""

from __future__ import annotations

from .models import Archetype, Complexity, ProjectAnalysis, TechStackEntry


COMMERCE = ProjectAnalysis(
    archetype=Archetype.COMMERCE,
    goals=(
        "Create seamless online shopping experience",
        "Implement secure payment processing",
        "Build inventory management system",
        "Optimize for mobile commerce",
    ),
    features=(
        "Product catalog with search and filters",
        "Shopping cart and checkout flow",
        "User authentication and profiles",
        "Payment gateway integration",
        "Order tracking and history",
        "Admin dashboard for inventory",
        "Reviews and ratings system",
        "Email notifications",
    ),
    tech_stack=(
        TechStackEntry(
            category="Frontend",
            technologies=("React", "Next.js", "Tailwind CSS"),
            reason="Modern UI with SSR for SEO",
        ),
        TechStackEntry(
            category="Backend",
            technologies=("Node.js", "Express", "PostgreSQL"),
            reason="Scalable API with relational data",
        ),
        TechStackEntry(
            category="Payments",
            technologies=("Stripe", "PayPal"),
            reason="Secure payment processing",
        ),
        TechStackEntry(
            category="Hosting",
            technologies=("Vercel", "AWS"),
            reason="Reliable deployment and scaling",
        ),
    ),
    timeline="6-12 months",
    complexity=Complexity.HIGH,
    team_size="4-6 developers",
)


SOCIAL = ProjectAnalysis(
    archetype=Archetype.SOCIAL,
    goals=(
        "Foster meaningful user connections",
        "Create engaging content sharing platform",
        "Implement real-time communication",
        "Build scalable user management",
    ),
    features=(
        "User profiles and authentication",
        "Real-time messaging and chat",
        "Content feed and posting",
        "Friend/follower system",
        "Notifications and alerts",
        "Media sharing (photos, videos)",
        "Privacy and security controls",
        "Content moderation tools",
    ),
    tech_stack=(
        TechStackEntry(
            category="Frontend",
            technologies=("React", "TypeScript", "Socket.io"),
            reason="Real-time updates and type safety",
        ),
        TechStackEntry(
            category="Backend",
            technologies=("Node.js", "Express", "MongoDB"),
            reason="Flexible data structure for social features",
        ),
        TechStackEntry(
            category="Real-time",
            technologies=("WebSocket", "Redis"),
            reason="Live messaging and caching",
        ),
        TechStackEntry(
            category="Media",
            technologies=("Cloudinary", "AWS S3"),
            reason="Efficient media storage and delivery",
        ),
    ),
    timeline="8-15 months",
    complexity=Complexity.HIGH,
    team_size="5-8 developers",
)


ANALYTICS = ProjectAnalysis(
    archetype=Archetype.ANALYTICS,
    goals=(
        "Provide clear data visualization",
        "Enable data-driven decision making",
        "Create intuitive user interface",
        "Ensure real-time data updates",
    ),
    features=(
        "Interactive charts and graphs",
        "Custom dashboard creation",
        "Data filtering and sorting",
        "Export and reporting tools",
        "User role management",
        "Real-time data refresh",
        "Mobile-responsive design",
        "API integrations",
    ),
    tech_stack=(
        TechStackEntry(
            category="Frontend",
            technologies=("React", "D3.js", "Chart.js"),
            reason="Rich data visualization capabilities",
        ),
        TechStackEntry(
            category="Backend",
            technologies=("Python", "FastAPI", "PostgreSQL"),
            reason="Excellent data processing and analysis",
        ),
        TechStackEntry(
            category="Visualization",
            technologies=("Plotly", "Recharts"),
            reason="Interactive charts and graphs",
        ),
        TechStackEntry(
            category="Deployment",
            technologies=("Docker", "AWS"),
            reason="Containerized deployment and scaling",
        ),
    ),
    timeline="4-8 months",
    complexity=Complexity.MEDIUM,
    team_size="3-4 developers",
)


GENERIC = ProjectAnalysis(
    archetype=Archetype.GENERIC,
    goals=(
        "Create user-friendly interface",
        "Implement core functionality",
        "Ensure scalable architecture",
        "Optimize for performance",
    ),
    features=(
        "User authentication and profiles",
        "Core feature implementation",
        "Responsive design",
        "Search and filtering",
        "Data management",
        "Settings and preferences",
        "Email notifications",
        "API integrations",
    ),
    tech_stack=(
        TechStackEntry(
            category="Frontend",
            technologies=("React", "TypeScript", "Tailwind CSS"),
            reason="Modern development with type safety",
        ),
        TechStackEntry(
            category="Backend",
            technologies=("Node.js", "Express", "MongoDB"),
            reason="JavaScript full-stack for rapid development",
        ),
        TechStackEntry(
            category="Authentication",
            technologies=("Auth0", "JWT"),
            reason="Secure user management",
        ),
        TechStackEntry(
            category="Hosting",
            technologies=("Netlify", "Heroku"),
            reason="Easy deployment and scaling",
        ),
    ),
    timeline="3-6 months",
    complexity=Complexity.MEDIUM,
    team_size="2-3 developers",
)


TEMPLATES: dict[Archetype, ProjectAnalysis] = {
    Archetype.COMMERCE: COMMERCE,
    Archetype.SOCIAL: SOCIAL,
    Archetype.ANALYTICS: ANALYTICS,
    Archetype.GENERIC: GENERIC,
}
