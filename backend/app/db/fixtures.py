"""
Demo fixtures: three open roles, twelve screened applicants and the
rejection e-mail templates offered on the bulk e-mail page.

applicants_count is not listed here; seed_records() derives it from the
candidates so the seeded store starts consistent.
"""

from collections import Counter
from datetime import date

from app.schemas import Candidate, EmailTemplate, Job

SEED_JOBS = [
    {
        "id": "job-1",
        "title": "Senior Frontend Developer",
        "department": "Engineering",
        "description": (
            "We are looking for an experienced Frontend Developer to join our team. "
            "You will be responsible for building user interfaces and improving user "
            "experience across our products. Experience with React, TypeScript, and "
            "modern CSS is essential."
        ),
        "requirements": (
            "5+ years of frontend development experience\n"
            "Proficiency in React and TypeScript\n"
            "Experience with modern CSS and component libraries\n"
            "Familiarity with testing frameworks\n"
            "Strong problem-solving skills"
        ),
        "location": "Mumbai, Hybrid",
        "type": "full-time",
        "status": "active",
    },
    {
        "id": "job-2",
        "title": "Product Manager",
        "department": "Product",
        "description": (
            "We are seeking a Product Manager to drive product strategy and roadmap. "
            "You will work closely with engineering, design, and stakeholders to deliver "
            "exceptional products that solve real customer problems."
        ),
        "requirements": (
            "3+ years of product management experience\n"
            "Strong analytical and communication skills\n"
            "Experience with agile methodologies\n"
            "Ability to translate business needs into product requirements"
        ),
        "location": "Bangalore, Remote",
        "type": "full-time",
        "status": "active",
    },
    {
        "id": "job-3",
        "title": "UX Designer",
        "department": "Design",
        "description": (
            "Join our design team as a UX Designer. You will create intuitive and "
            "beautiful user experiences, conduct user research, and collaborate with "
            "product and engineering teams."
        ),
        "requirements": (
            "4+ years of UX design experience\n"
            "Proficiency in Figma or similar tools\n"
            "Portfolio demonstrating user-centered design\n"
            "Experience with design systems"
        ),
        "location": "Mumbai, Remote",
        "type": "full-time",
        "status": "active",
    },
]

# (id, job_id, name, email, phone, score, recommendation, applied, rationale)
_CANDIDATE_ROWS = [
    ("cand-1", "job-1", "Priya Sharma", "priya.sharma@email.com", "+91 98765 43210", 92, "interview", "2024-12-10",
     "Excellent match with 6+ years of React experience. Strong portfolio demonstrating complex UI "
     "implementations. Previous experience at a SaaS company aligns well with our tech stack."),
    ("cand-2", "job-1", "Rahul Verma", "rahul.verma@email.com", "+91 87654 32109", 85, "interview", "2024-12-11",
     "Strong technical background with 5 years of frontend experience. Good knowledge of React and "
     "modern JavaScript. Could benefit from more TypeScript exposure but overall a solid candidate."),
    ("cand-3", "job-1", "Anita Desai", "anita.desai@email.com", "+91 76543 21098", 78, "interview", "2024-12-09",
     "Good frontend skills with 4 years of experience. Has worked with React but limited TypeScript "
     "experience. Portfolio shows creative work but may need mentoring on enterprise-level applications."),
    ("cand-4", "job-1", "Vikram Singh", "vikram.singh@email.com", "+91 65432 10987", 65, "on-hold", "2024-12-08",
     "3 years of experience with mixed frontend and backend work. React knowledge is present but not "
     "deep. May be better suited for a mid-level position. Consider for future openings."),
    ("cand-5", "job-1", "Meera Patel", "meera.patel@email.com", "+91 54321 09876", 68, "on-hold", "2024-12-12",
     "Interesting background in design and frontend development. 4 years of experience but more "
     "focused on design than development. Could be a good culture fit but technical skills need evaluation."),
    ("cand-6", "job-1", "Arjun Kumar", "arjun.kumar@email.com", "+91 43210 98765", 72, "on-hold", "2024-12-07",
     "Solid experience in web development but primarily with Angular. React experience is limited to "
     "personal projects. Strong potential but may require ramp-up time."),
    ("cand-7", "job-1", "Deepak Reddy", "deepak.reddy@email.com", "+91 32109 87654", 70, "on-hold", "2024-12-06",
     "Has frontend development experience but primarily in Vue.js. Transferable skills are present but "
     "specific React expertise is lacking. Consider for training investment."),
    ("cand-8", "job-1", "Sneha Iyer", "sneha.iyer@email.com", "+91 21098 76543", 62, "on-hold", "2024-12-05",
     "Has frontend development experience but primarily in Vue.js. Transferable skills are present but "
     "specific React expertise is lacking."),
    ("cand-9", "job-1", "Karan Malhotra", "karan.malhotra@email.com", "+91 10987 65432", 42, "reject", "2024-12-04",
     "2 years of experience, primarily in backend development. Frontend skills are basic and do not meet "
     "the senior-level requirements. Resume shows gaps that need clarification."),
    ("cand-10", "job-1", "Divya Nair", "divya.nair@email.com", "+91 09876 54321", 35, "reject", "2024-12-03",
     "Recent graduate with internship experience only. Skills listed are academic and lack professional "
     "depth. Would be suitable for junior positions in the future."),
    ("cand-11", "job-2", "Amit Kapoor", "amit.kapoor@email.com", "+91 98123 45678", 88, "interview", "2024-12-11",
     "Strong product management background with 4 years at a B2B SaaS company. Experience with agile "
     "methodologies and cross-functional team leadership. Great cultural fit."),
    ("cand-12", "job-3", "Neha Gupta", "neha.gupta@email.com", "+91 87234 56789", 90, "interview", "2024-12-10",
     "Exceptional UX portfolio with work for major tech companies. 5 years of experience with strong user "
     "research skills. Design thinking approach aligns perfectly with our needs."),
]

SEED_LAST_UPDATED = date(2024, 12, 14)

SEED_CANDIDATES = [
    {
        "id": cid,
        "job_id": job_id,
        "name": name,
        "email": email,
        "phone": phone,
        "resume_score": score,
        "rationale": rationale,
        "recommendation": recommendation,
        "status": "pending",
        "applied_date": date.fromisoformat(applied),
        "last_updated": SEED_LAST_UPDATED,
    }
    for cid, job_id, name, email, phone, score, recommendation, applied, rationale in _CANDIDATE_ROWS
]

SEED_EMAIL_TEMPLATES = [
    {
        "id": "supportive",
        "name": "Supportive & Encouraging",
        "subject": "Thank You for Your Application",
        "type": "rejection",
        "body": (
            "Dear {name},\n\n"
            "Thank you for taking the time to apply for the {position} role at our company. "
            "We truly appreciate your interest and the effort you put into your application.\n\n"
            "After careful consideration, we've decided to move forward with other candidates whose "
            "experience more closely matches our current needs. This was a difficult decision, as we "
            "received many strong applications.\n\n"
            "We were impressed by your background and encourage you to apply for future openings that "
            "align with your skills. We'll keep your resume on file for consideration.\n\n"
            "We wish you all the best in your job search and future endeavors.\n\n"
            "Warm regards,\nHR Team"
        ),
    },
    {
        "id": "brief",
        "name": "Brief & Professional",
        "subject": "Application Update",
        "type": "rejection",
        "body": (
            "Dear {name},\n\n"
            "Thank you for applying for the {position} position. After reviewing all applications, "
            "we have decided to proceed with other candidates.\n\n"
            "We appreciate your interest in our company and wish you success in your career journey.\n\n"
            "Best regards,\nHR Team"
        ),
    },
    {
        "id": "detailed",
        "name": "Detailed Feedback",
        "subject": "Your Application Status",
        "type": "rejection",
        "body": (
            "Dear {name},\n\n"
            "Thank you for your application for the {position} role. We've completed our review "
            "process and wanted to provide you with an update.\n\n"
            "While your application showed promise, we've decided to move forward with candidates "
            "whose qualifications more closely match our immediate requirements.\n\n"
            "We encourage you to:\n"
            "- Continue developing your skills in your area of expertise\n"
            "- Keep an eye on our careers page for future opportunities\n"
            "- Connect with us on LinkedIn to stay updated\n\n"
            "Thank you again for your interest, and we wish you every success.\n\n"
            "Best wishes,\nHR Team"
        ),
    },
]


def seed_records() -> tuple[list[Job], list[Candidate], list[EmailTemplate]]:
    """Build validated seed records with applicant counts derived from candidates."""
    per_job = Counter(row["job_id"] for row in SEED_CANDIDATES)
    jobs = [Job.model_validate({**row, "applicants_count": per_job[row["id"]]}) for row in SEED_JOBS]
    candidates = [Candidate.model_validate(row) for row in SEED_CANDIDATES]
    templates = [EmailTemplate.model_validate(row) for row in SEED_EMAIL_TEMPLATES]
    return jobs, candidates, templates
