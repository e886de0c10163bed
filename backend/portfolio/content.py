"""Hand-maintained page content. Edit here to update the portfolio."""

from .schemas import (
    Award,
    ContactLink,
    Experience,
    FeaturedProject,
    Interest,
    Leadership,
    PortfolioContent,
    SkillCategory,
)

CONTENT = PortfolioContent(
    name="Aron Cheng",
    degree=(
        "B.S. in Industrial & Systems Engineering - "
        "Concentration in Analytics & Data Science"
    ),
    contact_links=[
        ContactLink(label="Email", url="mailto:aroncheng9@gmail.com"),
        ContactLink(label="LinkedIn", url="https://www.linkedin.com/in/aron-cheng/"),
        ContactLink(label="GitHub", url="https://github.com/lemonyhead"),
    ],
    professional_interests=["Data Science", "Product Management", "Tech Strategy"],
    awards=[
        Award(
            title="Presidential Undergraduate Research Award (PURA)",
            description=(
                "Competitive Georgia Tech research grant and stipend for undergraduate "
                "research with faculty mentorship"
            ),
        ),
        Award(
            title="Evelyn Pennington Outstanding Service Award",
            description=(
                "Selected by Georgia Tech's College of Engineering as the top student "
                "contributor to the Industrial Engineering community (2024-2025)"
            ),
        ),
        Award(
            title="IISE Rising Star Award",
            description=(
                "Given by the Institute of Industrial and Systems Engineers to one "
                "2nd/3rd-year student for leadership and impact in advancing Industrial "
                "Engineering at Georgia Tech"
            ),
        ),
        Award(
            title="Celebrating Student Leaders Honoree",
            description=(
                "Selected by Georgia Tech's Center for Student Engagement as one of 20-30 "
                "student leaders recognized campus-wide with featured banners"
            ),
        ),
    ],
    skill_categories=[
        SkillCategory(title="Programming", skills=["Python", "SQL", "R", "HTML/CSS", "Git"]),
        SkillCategory(
            title="Data Science",
            skills=["Pandas", "NumPy", "Scikit-learn", "TensorFlow", "PyTorch"],
        ),
        SkillCategory(
            title="Cloud & Tools",
            skills=["AWS", "Azure", "GCP", "BigQuery", "Tableau", "Vertex AI", "Cloud Scheduler"],
        ),
        SkillCategory(
            title="Frameworks",
            skills=["Flask", "Dash", "NetworkX", "Plotly", "Dash Bootstrap", "Plotly Express"],
        ),
    ],
    experiences=[
        Experience(
            company="PepsiCo",
            role="Supply Chain Operations Intern",
            period="June 2025 - Present",
            achievements=[
                "Partnered cross-functionally with engineering, supply chain, and maintenance "
                "teams to standardize inventory workflows, uncovering $2M+ in previously "
                "unaccounted critical parts",
                "Reorganized 400+ parts across freight containers and centralized storage, "
                "improving accessibility and reducing equipment downtime",
                "Acting as Maintenance Supervisor during final project phase, coordinating "
                "50+ frontline workers across 3 shifts",
            ],
        ),
        Experience(
            company="Georgia Institute of Technology",
            role="Undergraduate Researcher",
            period="January 2025 - Present",
            achievements=[
                "Developed a novel probabilistic algorithm that improved survival estimation "
                "accuracy by 15-30% compared to baseline models",
                "Conducting simulation-based validation against traditional methods across "
                "exponential and Weibull scenarios",
                "Extending validation using real-world patient data from Duke Hospital to "
                "assess robustness and clinical applicability",
            ],
        ),
        Experience(
            company="Georgia Institute of Technology",
            role="Full-Stack Student Data Developer",
            period="January 2025 - Present",
            achievements=[
                "Built a data cleaning pipeline with Pandas to convert raw survey exports into "
                "structured, analysis-ready formats for backend processing",
                "Developed a backend multi-role login system with dynamic user routing and "
                "role-based dashboard access using Flask",
                "Designed and implemented frontend layouts to showcase Georgia Tech's "
                "sustainability course offerings that adapt based on user type, improving "
                "usability and visual appeal across roles with HTML/CSS and Dash",
            ],
        ),
        Experience(
            company="Dexcom",
            role="Data Analytics & Engineering Intern",
            period="May 2024 - August 2024",
            achievements=[
                "Developed Tableau dashboards monitoring supply chain data quality across 9 "
                "BigQuery views and 3M+ records",
                "Optimized 500+ line Python script for processing SKU data, achieving 88% "
                "runtime reduction",
                "Restructured Tableau data model integrating 6 BigQuery tables, tracking "
                "$200-600M monthly inventory",
            ],
        ),
        Experience(
            company="OMP",
            role="Supply Chain Software Consulting Intern",
            period="January 2024 - May 2024, August 2024 - December 2024",
            achievements=[
                "Worked on configuration validation and scenario testing for a Fortune 50 "
                "client using OMP's supply chain planning software",
                "Supported change management documentation and helped improve client "
                "understanding of parameter behavior during planning cycles",
            ],
        ),
    ],
    featured_projects=[
        FeaturedProject(
            title="Stock Price Prediction Modeling",
            description=(
                "ML pipeline predicting short-term stock movements using technical "
                "indicators and macroeconomic features"
            ),
            tech=["Python", "XGBoost", "TensorFlow", "Backtesting"],
            results="62% directional accuracy, 114% cumulative returns",
        ),
        FeaturedProject(
            title="Amazon Sales Data Analytics",
            description=(
                "Comprehensive analysis of 120K+ Amazon sales entries with advanced ML modeling"
            ),
            tech=["Python", "Pandas", "Scikit-learn", "RandomForest"],
            results="15% model accuracy improvement, MSE < 0.0001 days",
        ),
        FeaturedProject(
            title="Basketball Win Probability Modeling",
            description=(
                "ML models including CNNs and Elo rating systems for win probability estimation"
            ),
            tech=["Python", "CNN", "Logistic Regression", "KNN"],
            results="66% accuracy in forecasting winning teams",
        ),
    ],
    leadership=[
        Leadership(
            organization="GT 1000 Team Leader",
            summary=(
                "Will include mentorship and peer leadership work from Fall 2025, supporting "
                "first-year Georgia Tech students in their academic and campus transitions."
            ),
            upcoming=True,
        ),
        Leadership(
            organization="Institute of Industrial and Systems Engineers",
            role="VP of Internal/External Affairs",
            period="December 2023 - Present",
            achievements=[
                "Led launch of consulting project initiative resulting in 10+ projects with "
                "40+ students across 3 semesters",
                "Pioneered corporate-sponsored case competition, securing BDO partnership and "
                "$600 in prize money",
                "Managed over $100,000 in corporate sponsorships for conferences and "
                "professional development",
            ],
        ),
        Leadership(
            organization="Georgia Tech Chess Club",
            role="VP of Finance",
            period="May 2023 - May 2025",
            achievements=[
                "Managed $5,000+ annual budget and secured funding for tournaments and equipment",
                "Helped organize on-campus tournaments and weekly meetings for 50+ active members",
            ],
        ),
    ],
    interests=[
        Interest(
            title="Chess",
            badge="Class A Level",
            headline="~1850 Rating",
            description=(
                "Strategic thinking and pattern recognition skills developed through "
                "competitive chess, achieving Class A level proficiency with consistent "
                "tournament performance and continuous improvement."
            ),
            traits=["Focus & Mental Endurance", "Strategic Analysis", "Risk Assessment"],
            links=[
                ContactLink(
                    label="Chess.com Profile",
                    url="https://www.chess.com/member/lemonyhead",
                ),
                ContactLink(
                    label="USCF Tournament Profile",
                    url="https://www.uschess.org/msa/MbrDtlMain.php?16073381",
                ),
            ],
        ),
        Interest(
            title="Travel & Exploration",
            badge="6 Countries",
            headline="Growing Journey",
            description=(
                "Recently began international travel, exploring diverse cultures and "
                "perspectives. Extensively traveled across the United States, with frequent "
                "visits to major cities including San Diego, Los Angeles, New York, "
                "Charlotte, and Atlanta."
            ),
            traits=["Cultural Awareness", "Open-Mindedness", "Adaptability"],
        ),
    ],
    interests_reflection=(
        "Chess has strengthened my analytical thinking and strategic planning abilities, "
        "directly translating to complex problem-solving in data science and engineering. "
        "Travel experiences across diverse US cities and international destinations have "
        "enhanced my cultural awareness and adaptability, valuable assets in today's global "
        "business environment. Continuously seeking new experiences and challenges that "
        "expand perspective and build character, every experience contributes to personal "
        "and professional development with a growth mindset."
    ),
)
