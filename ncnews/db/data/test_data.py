"""Fixture bundle used by the test suite: 3 topics, 4 users, 13 articles, 18 comments.

Comments reference articles by the id they receive when inserted in list
order on an empty table.
"""
from datetime import datetime, timezone


def _ts(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


topics = [
    {"description": "The man, the Mitch, the legend", "slug": "mitch"},
    {"description": "Not dogs", "slug": "cats"},
    {"description": "what books are made of", "slug": "paper"},
]

users = [
    {"username": "butter_bridge", "name": "jonny",
     "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg"},
    {"username": "icellusedkars", "name": "sam",
     "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4"},
    {"username": "rogersop", "name": "paul",
     "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4"},
    {"username": "lurker", "name": "do_nothing",
     "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png"},
]

_IMG = "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"

articles = [
    {"title": "Living in the shadow of a great man", "topic": "mitch", "author": "butter_bridge",
     "body": "I find this existence challenging", "created_at": _ts(1594329060000), "votes": 100,
     "article_img_url": _IMG},
    {"title": "Sony Vaio; or, The Laptop", "topic": "mitch", "author": "icellusedkars",
     "body": "Call me Mitchell. Some years ago - never mind how long precisely - having little or no money in my purse, "
             "and nothing particular to interest me on shore, I thought I would buy a laptop about a little and see the codey part of the world.",
     "created_at": _ts(1602828180000), "votes": 0, "article_img_url": _IMG},
    {"title": "Eight pug gifs that remind me of mitch", "topic": "mitch", "author": "icellusedkars",
     "body": "some gifs", "created_at": _ts(1604394720000), "votes": 0, "article_img_url": _IMG},
    {"title": "Student SUES Mitch!", "topic": "mitch", "author": "rogersop",
     "body": "We all love Mitch and his wonderful, unique typing style. However, the volume of his typing has "
             "ALLEGEDLY burst another students eardrums, and they are now suing for damages",
     "created_at": _ts(1588731240000), "votes": 0, "article_img_url": _IMG},
    {"title": "UNCOVERED: catspiracy to bring down democracy", "topic": "cats", "author": "rogersop",
     "body": "Bastet walks amongst us, and the cats are taking arms!", "created_at": _ts(1596464040000), "votes": 0,
     "article_img_url": _IMG},
    {"title": "A", "topic": "mitch", "author": "icellusedkars",
     "body": "Delicious tin of cat food", "created_at": _ts(1602986400000), "votes": 0, "article_img_url": _IMG},
    {"title": "Z", "topic": "mitch", "author": "icellusedkars",
     "body": "I was hungry.", "created_at": _ts(1578406080000), "votes": 0, "article_img_url": _IMG},
    {"title": "Does Mitch predate civilisation?", "topic": "mitch", "author": "icellusedkars",
     "body": "Archaeologists have uncovered a gigantic statue from the dawn of humanity, and it has an uncanny resemblance to Mitch.",
     "created_at": _ts(1587089280000), "votes": 0, "article_img_url": _IMG},
    {"title": "They're not exactly dogs, are they?", "topic": "mitch", "author": "butter_bridge",
     "body": "Well? Think about it.", "created_at": _ts(1591438200000), "votes": 0, "article_img_url": _IMG},
    {"title": "Seven inspirational thought leaders from Manchester UK", "topic": "mitch", "author": "rogersop",
     "body": "Who are we kidding, there is only one, and it's Mitch!", "created_at": _ts(1589433300000), "votes": 0,
     "article_img_url": _IMG},
    {"title": "Am I a cat?", "topic": "mitch", "author": "icellusedkars",
     "body": "Having run out of ideas for articles, I am staring at the wall blankly, like a cat. Does this make me a cat?",
     "created_at": _ts(1579126860000), "votes": 0, "article_img_url": _IMG},
    {"title": "Moustache", "topic": "mitch", "author": "butter_bridge",
     "body": "Have you seen the size of that thing?", "created_at": _ts(1602419040000), "votes": 0,
     "article_img_url": _IMG},
    {"title": "Another article about Mitch", "topic": "mitch", "author": "butter_bridge",
     "body": "There will never be enough articles about Mitch!", "created_at": _ts(1602419040000), "votes": 0,
     "article_img_url": _IMG},
]

comments = [
    {"body": "Oh, I've got compassion running out of my nose, pal! I'm the Sultan of Sentiment!",
     "votes": 16, "author": "butter_bridge", "article_id": 9, "created_at": _ts(1586179020000)},
    {"body": "The beautiful thing about treasure is that it exists. Got to find out what kind of sheets these are; not my taste.",
     "votes": 14, "author": "butter_bridge", "article_id": 1, "created_at": _ts(1604113380000)},
    {"body": "Replacing the quiet elegance of the dark suit and tie with the casual indifference of these muted earth tones "
             "is a form of fashion suicide, but, uh, call me crazy, onyou it works.",
     "votes": 100, "author": "icellusedkars", "article_id": 1, "created_at": _ts(1583025180000)},
    {"body": " I carry a log, yes. Is it funny to you? It is not to me.",
     "votes": -100, "author": "icellusedkars", "article_id": 1, "created_at": _ts(1582459260000)},
    {"body": "I hate streaming noses", "votes": 0, "author": "icellusedkars", "article_id": 1,
     "created_at": _ts(1604437200000)},
    {"body": "I hate streaming eyes even more", "votes": 0, "author": "icellusedkars", "article_id": 1,
     "created_at": _ts(1586642520000)},
    {"body": "Lobster pot", "votes": 0, "author": "icellusedkars", "article_id": 1,
     "created_at": _ts(1589577540000)},
    {"body": "Delicious crackerbreads", "votes": 0, "author": "icellusedkars", "article_id": 1,
     "created_at": _ts(1586899140000)},
    {"body": "Superficially charming", "votes": 0, "author": "icellusedkars", "article_id": 1,
     "created_at": _ts(1577848080000)},
    {"body": "git push origin master", "votes": 0, "author": "icellusedkars", "article_id": 3,
     "created_at": _ts(1592641440000)},
    {"body": "Ambidextrous marsupial", "votes": 0, "author": "icellusedkars", "article_id": 3,
     "created_at": _ts(1600560600000)},
    {"body": "Massive intercranial brain haemorrhage", "votes": 0, "author": "icellusedkars", "article_id": 1,
     "created_at": _ts(1583133000000)},
    {"body": "Fruit pastilles", "votes": 0, "author": "icellusedkars", "article_id": 1,
     "created_at": _ts(1592220300000)},
    {"body": "What do you see? I have no idea where this will lead us. This place I speak of, is known as the Black Lodge.",
     "votes": 16, "author": "icellusedkars", "article_id": 5, "created_at": _ts(1591682400000)},
    {"body": "I am 100% sure that we're not completely sure.", "votes": 1, "author": "butter_bridge", "article_id": 5,
     "created_at": _ts(1606176480000)},
    {"body": "This is a bad article name", "votes": 1, "author": "butter_bridge", "article_id": 6,
     "created_at": _ts(1602433380000)},
    {"body": "The owls are not what they seem.", "votes": 20, "author": "icellusedkars", "article_id": 9,
     "created_at": _ts(1584205320000)},
    {"body": "This morning, I showered for nine minutes.", "votes": 16, "author": "butter_bridge", "article_id": 1,
     "created_at": _ts(1595294400000)},
]
