CAREERS = [
    {
        "id": 1,
        "title": "Software Engineer",
        "description": "Design, develop, and maintain software applications and systems.",
        "average_salary": "₦2,400,000 - ₦8,400,000",
        "growth_rate": "22%",
        "skills_required": ["Programming", "Problem Solving", "Algorithms", "Software Architecture", "Testing"],
        "education": "Bachelor's in Computer Science or related field",
        "work_environment": "Office/Remote",
        "personality_fit": ["Analytical", "Creative", "Detail-oriented"],
    },
    {
        "id": 2,
        "title": "Medical Doctor",
        "description": "Diagnose and treat illnesses, injuries, and health conditions.",
        "average_salary": "₦3,600,000 - ₦12,000,000",
        "growth_rate": "15%",
        "skills_required": ["Medical Knowledge", "Communication", "Empathy", "Critical Thinking", "Manual Dexterity"],
        "education": "Medical Degree (MBBS) + Residency",
        "work_environment": "Hospitals/Clinics",
        "personality_fit": ["Social", "Analytical", "Caring"],
    },
    {
        "id": 3,
        "title": "Data Scientist",
        "description": "Analyze complex data to extract insights using statistics and machine learning.",
        "average_salary": "₦2,100,000 - ₦7,200,000",
        "growth_rate": "35%",
        "skills_required": ["Statistics", "Python/R", "Machine Learning", "Data Visualization", "Business Intelligence"],
        "education": "Bachelor's in Statistics, Mathematics, or Computer Science",
        "work_environment": "Office/Remote",
        "personality_fit": ["Analytical", "Creative", "Detail-oriented"],
    },
    {
        "id": 4,
        "title": "Civil Engineer",
        "description": "Design, build, and maintain roads, bridges, buildings, and water systems.",
        "average_salary": "₦1,800,000 - ₦6,000,000",
        "growth_rate": "8%",
        "skills_required": ["Engineering Design", "Project Management", "AutoCAD", "Mathematics", "Problem Solving"],
        "education": "Bachelor's in Civil Engineering",
        "work_environment": "Office/Field",
        "personality_fit": ["Practical", "Analytical", "Leadership"],
    },
    {
        "id": 5,
        "title": "Digital Marketing Specialist",
        "description": "Develop and execute digital marketing strategies across online platforms.",
        "average_salary": "₦1,200,000 - ₦4,800,000",
        "growth_rate": "28%",
        "skills_required": ["SEO/SEM", "Social Media", "Content Creation", "Analytics", "Creativity"],
        "education": "Bachelor's in Marketing, Communications, or related field",
        "work_environment": "Office/Remote",
        "personality_fit": ["Creative", "Social", "Analytical"],
    },
    {
        "id": 6,
        "title": "Financial Analyst",
        "description": "Analyze financial data and market trends to guide investment decisions.",
        "average_salary": "₦1,800,000 - ₦5,400,000",
        "growth_rate": "12%",
        "skills_required": ["Financial Modeling", "Excel", "Market Analysis", "Risk Assessment", "Communication"],
        "education": "Bachelor's in Finance, Economics, or Accounting",
        "work_environment": "Office",
        "personality_fit": ["Analytical", "Detail-oriented", "Leadership"],
    },
]
