"""Ending rewrite tables: plain/blunt register to polite register.

Keys are suffixes of the sentence-final clause.  Lookup is longest suffix
first, so specific verb forms (助かった) win over generic adjective forms
(かった).
"""

from __future__ import annotations

ENDING_REWRITES: dict[str, str] = {
    # copula
    "だ": "です",
    "だった": "でした",
    "である": "です",
    "であった": "でした",
    "だよ": "ですよ",
    "だね": "ですね",
    "だよね": "ですよね",
    "なんだ": "なんです",
    "ではない": "ではありません",
    "じゃない": "ではありません",
    "ではなかった": "ではありませんでした",
    "じゃなかった": "ではありませんでした",
    "だろう": "でしょう",
    # adjectives
    "い": "いです",
    "かった": "かったです",
    "ない": "ないです",
    "なかった": "なかったです",
    "かったよ": "かったです",
    "かったね": "かったですね",
    # suru / common verbs
    "する": "します",
    "した": "しました",
    "しない": "しません",
    "しなかった": "しませんでした",
    "している": "しています",
    "していた": "していました",
    "ている": "ています",
    "ていた": "ていました",
    "ていない": "ていません",
    "てる": "ています",
    "てた": "ていました",
    "いる": "います",
    "いない": "いません",
    "ある": "あります",
    "あった": "ありました",
    "なる": "なります",
    "なった": "なりました",
    "できる": "できます",
    "できた": "できました",
    "できない": "できません",
    "できなかった": "できませんでした",
    "思う": "思います",
    "思った": "思いました",
    "感じる": "感じます",
    "感じた": "感じました",
    "来る": "来ます",
    "来た": "来ました",
    "くる": "きます",
    "きた": "きました",
    "行く": "行きます",
    "行った": "行きました",
    "見る": "見ます",
    "見た": "見ました",
    "もらう": "もらいます",
    "もらった": "もらいました",
    "もらえた": "もらえました",
    "くれた": "くれました",
    "くれる": "くれます",
    "使った": "使いました",
    "買った": "買いました",
    "言った": "言いました",
    "会った": "会いました",
    "待った": "待ちました",
    "受けた": "受けました",
    "助かった": "助かりました",
    "わかった": "わかりました",
    "分かった": "分かりました",
    "頼んだ": "頼みました",
    "飲んだ": "飲みました",
    "読んだ": "読みました",
    "楽しんだ": "楽しみました",
    "選んだ": "選びました",
    "遊んだ": "遊びました",
    "呼んだ": "呼びました",
    "済んだ": "済みました",
    "混んだ": "混みました",
    "食べた": "食べました",
    "食べる": "食べます",
    "ありがとう": "ありがとうございます",
    # ichidan dictionary forms written in kana
    "える": "えます",
    "ける": "けます",
    "げる": "げます",
    "せる": "せます",
    "ねる": "ねます",
    "べる": "べます",
    "める": "めます",
    "れる": "れます",
    "れた": "れました",
    "えた": "えました",
    "けた": "けました",
    "めた": "めました",
}

# Interior blunt connectives and their polite counterparts.  Only rewritten
# when followed by 、 , or whitespace, which keeps words like だし(出汁)
# untouched.
CONNECTIVE_REWRITES: dict[str, str] = {
    "だが": "ですが",
    "だけど": "ですが",
    "だけれど": "ですが",
    "だけれども": "ですが",
    "だし": "ですし",
    "だから": "ですから",
    "かったけど": "かったですが",
    "かったが": "かったですが",
}

POLITE_ENDINGS: tuple[str, ...] = (
    "です",
    "ます",
    "でした",
    "ました",
    "ません",
    "ませんでした",
    "ください",
    "くださいませ",
    "ございます",
    "でしょう",
    "ましょう",
    "ですね",
    "ますね",
    "ですよ",
    "ますよ",
    "ですよね",
    "ますよね",
    "ですか",
    "ますか",
    "でしたね",
    "ましたね",
)
