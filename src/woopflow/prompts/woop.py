from __future__ import annotations

WOOP_OUTPUT_KEYS = ("wish", "bestOutcome", "innerObstacle", "plan")

WOOP_PROMPT_TEMPLATE = (
    "You are an experienced learning coach who applies the WOOP method "
    "(Wish, Outcome, Obstacle, Plan) to help learners turn goals into concrete action.\n"
    "\n"
    "Use the learner profile and the matched learning resources below to write a "
    "personalized WOOP report.\n"
    "\n"
    "Learner personal information:\n"
    "{personal_info}\n"
    "\n"
    "Current skill level:\n"
    "{current_skill}\n"
    "\n"
    "Learning goals:\n"
    "{goals}\n"
    "\n"
    "Timeframe: {timeframe} ({timeframe_description})\n"
    "\n"
    "Matched learning resources:\n"
    "{resources}\n"
    "\n"
    "Instructions:\n"
    "1. Wish: state one challenging but feasible wish the learner can achieve within the "
    "\"{timeframe}\" timeframe ({timeframe_description}). Use 3 to 6 words.\n"
    "2. Outcome: state the single best outcome of fulfilling the wish. Use 3 to 6 words.\n"
    "3. Obstacle: state the main inner obstacle (a habit, emotion or belief of the learner) "
    "that could stop them. Use 3 to 6 words.\n"
    "4. Plan: write one If-Then plan in the form \"If <obstacle situation>, then I will "
    "<action>.\" The action must reference at least one of the matched learning resources "
    "by its title when resources are available.\n"
    "\n"
    "Output format:\n"
    "Respond with a single compact JSON object and nothing else, using exactly these keys: "
    "\"wish\", \"bestOutcome\", \"innerObstacle\", \"plan\". "
    "Every value must be a string. "
    "Do not add any extra commentary, explanations or markdown code fences."
)
