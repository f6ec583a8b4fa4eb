# Built-in comprehensive assessment shown on the public psychology test page.
# Each entry: (question, [four options]).

PSYCHOLOGY_QUESTIONS = [
    ("When making important decisions, I typically:", [
        "Analyze all available data and statistics thoroughly",
        "Trust my intuition and consider creative possibilities",
        "Seek input from trusted friends, family, or colleagues",
        "Choose the most practical and immediately actionable option",
    ]),
    ("In my free time, I prefer activities that:", [
        "Challenge my mind with puzzles, research, or complex problems",
        "Allow me to express myself creatively through art, music, or writing",
        "Involve spending quality time with people I care about",
        "Let me work with my hands or see tangible results",
    ]),
    ("When working on a team project, I naturally:", [
        "Organize timelines, delegate tasks, and ensure deadlines are met",
        "Generate innovative ideas and inspire others with new possibilities",
        "Focus on team harmony and make sure everyone feels included",
        "Handle the concrete tasks and implementation details",
    ]),
    ("I feel most satisfied when:", [
        "I solve a complex problem that others couldn't figure out",
        "I create something original that didn't exist before",
        "I help someone overcome a challenge or achieve their goals",
        "I complete a useful project that makes daily life easier",
    ]),
    ("When facing a stressful situation, I tend to:", [
        "Break down the problem logically and create a systematic plan",
        "Look for alternative approaches and think outside the box",
        "Talk it through with others and seek emotional support",
        "Take immediate action to address the most pressing issues",
    ]),
    ("My ideal career would allow me to:", [
        "Conduct research, analyze trends, and work with complex data",
        "Design, innovate, and bring new ideas to life",
        "Work directly with people to help them grow and succeed",
        "Build, fix, or improve things that have real-world impact",
    ]),
    ("When learning new skills, I learn best by:", [
        "Reading comprehensive materials and understanding theory first",
        "Experimenting freely and discovering through trial and error",
        "Learning from mentors and through group discussions",
        "Jumping in and learning through hands-on practice",
    ]),
    ("In social situations, people often see me as someone who:", [
        "Takes charge and naturally guides group decisions",
        "Brings energy and suggests fun, creative activities",
        "Listens well and helps others feel comfortable and heard",
        "Gets things done and handles practical arrangements",
    ]),
    ("I'm most motivated by work that:", [
        "Requires deep thinking and intellectual challenge",
        "Allows for self-expression and creative freedom",
        "Involves helping others and making a positive social impact",
        "Produces concrete, measurable results I can see and touch",
    ]),
    ("When I encounter a problem at work, my first instinct is to:", [
        "Research best practices and gather comprehensive information",
        "Brainstorm multiple creative solutions",
        "Discuss it with colleagues and get different perspectives",
        "Try the most straightforward solution and adjust as needed",
    ]),
    ("I feel energized when my environment is:", [
        "Quiet and organized, allowing for deep concentration",
        "Dynamic and flexible, encouraging innovation",
        "Collaborative and warm, fostering meaningful relationships",
        "Efficient and results-focused, with clear goals",
    ]),
    ("When planning a vacation, I:", [
        "Research destinations thoroughly and create detailed itineraries",
        "Choose unique, off-the-beaten-path experiences",
        "Plan activities that bring family and friends together",
        "Focus on practical considerations like cost and convenience",
    ]),
    ("In a leadership role, I would focus on:", [
        "Setting clear strategic vision and long-term planning",
        "Inspiring innovation and encouraging creative risk-taking",
        "Building strong team relationships and developing people",
        "Ensuring efficient operations and achieving concrete results",
    ]),
    ("I find deep satisfaction in:", [
        "Mastering complex concepts and becoming an expert in my field",
        "Creating something meaningful that expresses my vision",
        "Seeing others grow, succeed, and reach their full potential",
        "Building or fixing something that solves real problems",
    ]),
    ("My approach to risk-taking is:", [
        "Carefully calculated, I analyze potential outcomes thoroughly",
        "Intuitive and bold, I take creative risks for breakthroughs",
        "Collaborative, I prefer taking risks with the support of others",
        "Practical, I take risks when the benefits clearly outweigh costs",
    ]),
]
