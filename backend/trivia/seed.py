"""Bundled demo question sets loaded by ``flask db-reset``."""
from trivia import db
from trivia.models import QuestionSet, QuestionTemplate

DEMO_QUESTION_SETS = [
    {
        'name': 'General Knowledge',
        'questions': [
            ('Geography', 100, 'What is the capital of Norway?', 'Oslo'),
            ('Geography', 200, 'Which river flows through Vienna, Budapest and Belgrade?', 'The Danube'),
            ('Geography', 300, 'What is the smallest country in the world by area?', 'Vatican City'),
            ('Geography', 400, 'Which desert covers most of northern Chile?', 'The Atacama'),
            ('Geography', 500, 'What is the deepest lake in the world?', 'Lake Baikal'),
            ('Science', 100, 'What is the chemical symbol for gold?', 'Au'),
            ('Science', 200, 'How many bones are in the adult human body?', '206'),
            ('Science', 300, 'What planet has the shortest day in the solar system?', 'Jupiter'),
            ('Science', 400, 'What particle carries the electromagnetic force?', 'The photon'),
            ('Science', 500, 'What is the half-life of carbon-14, to the nearest thousand years?', 'About 6,000 years (5,730)'),
            ('History', 100, 'In which year did the Berlin Wall fall?', '1989'),
            ('History', 200, 'Who was the first person to walk on the Moon?', 'Neil Armstrong'),
            ('History', 300, 'Which empire built Machu Picchu?', 'The Inca Empire'),
            ('History', 400, 'What was the name of the ship Darwin sailed on?', 'HMS Beagle'),
            ('History', 500, 'Which treaty ended the Thirty Years\' War?', 'The Peace of Westphalia'),
        ],
    },
    {
        'name': 'Christmas',
        'questions': [
            ('Traditions', 100, 'What colour is Santa\'s suit?', 'Red'),
            ('Traditions', 200, 'Which country gives London a Christmas tree every year?', 'Norway'),
            ('Traditions', 300, 'What is the name of the Swedish Christmas goat?', 'Julbock'),
            ('Music', 100, 'Complete the title: "Jingle ___"', 'Bells'),
            ('Music', 200, 'Who sang "All I Want for Christmas Is You"?', 'Mariah Carey'),
            ('Music', 300, 'Which composer wrote "The Nutcracker"?', 'Tchaikovsky'),
        ],
    },
]


def seed_question_sets(sets=None):
    """Insert question sets with their template questions; returns the created sets."""
    created = []
    for entry in sets if sets is not None else DEMO_QUESTION_SETS:
        question_set = QuestionSet(name=entry['name'])
        db.session.add(question_set)
        for category, points, text, answer in entry['questions']:
            question_set.questions.append(QuestionTemplate(
                category=category,
                points=points,
                text=text,
                answer=answer,
            ))
        created.append(question_set)
    db.session.commit()
    return created
