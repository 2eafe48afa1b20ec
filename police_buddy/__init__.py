"""AP Police Buddy: bilingual police services assistant."""
