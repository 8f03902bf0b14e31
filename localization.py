from enum import Enum


class Translator:
    def __init__(self) -> None:
        self.language = "en"
        self.translations = {
            "en": {
                "sex.male": "Male",
                "sex.female": "Female",
                "activity_level.sedentary": "Mostly sitting",
                "activity_level.light": "Light exercise",
                "activity_level.moderate": "Moderate exercise",
                "activity_level.very_active": "Hard exercise",
                "activity_level.extreme": "Very hard exercise",
                "calorie_range.deficit": "Calorie deficit",
                "calorie_range.maintenance": "Maintenance",
                "calorie_range.surplus": "Calorie surplus",
                "calorie_range.optimal_muscle_gain": "Optimal for muscle gain",
                "muscle_gain_prediction.low": "Increase your training frequency",
                "muscle_gain_prediction.moderate": "Keep up the current pace",
                "muscle_gain_prediction.high": "Great progress",
                "muscle_gain_prediction.excellent": "Ideal training habits",
                "training_advice.increase_frequency": "Aim for strength training at least three times a week.",
                "training_advice.reduce_for_recovery": "Cut back to five sessions a week or fewer to leave room for recovery.",
                "training_advice.extend_session": "Extend sessions to at least 30 minutes.",
                "training_advice.shorten_session": "Sessions over 90 minutes risk fatigue; keep them shorter.",
                "training_advice.reduce_body_fat_first": "Lowering body fat will improve muscle gain.",
                "training_advice.raise_intensity": "Raise training intensity and frequency.",
                "training_advice.maintain_pace": "Maintain your current pace.",
                "calorie_advice.keep_cutting": "Body fat is high; keep the calorie deficit. About 0.5 kg a week is ideal.",
                "calorie_advice.light_cut": "Use a light deficit to lose fat while keeping muscle.",
                "calorie_advice.raise_intensity": "Your calorie balance is good. Raise training intensity to build more muscle.",
                "calorie_advice.improve_protein_and_frequency": "Calorie balance is fine; improve protein intake and training frequency.",
                "calorie_advice.lean_surplus": "The surplus should support muscle gain. Watch for fat gain.",
                "calorie_advice.excess_surplus": "Too many calories. Trim intake to balance muscle gain and fat loss.",
                "calorie_advice.ideal_balance": "Ideal calorie balance for efficient muscle gain. Keep this pace.",
                "weekly_calorie_trend.insufficient_data": "Not enough data",
                "weekly_calorie_trend.surplus": "Weekly average is a surplus. Good for muscle gain, watch body fat.",
                "weekly_calorie_trend.deficit": "Weekly average is a deficit. Fat loss is likely, protect muscle.",
                "weekly_calorie_trend.balanced_surplus": "A moderate surplus across the week. Well balanced.",
                "weekly_calorie_trend.shortfall": "Calories ran short across the week. Improve nutrition.",
                "protein.low": "Protein is low. Add chicken, fish, eggs and legumes.",
                "protein.adequate": "Protein intake is appropriate. Keep it up.",
                "protein.high": "Protein intake is too high. Adjust to a moderate amount.",
                "carbs.low": "Carbohydrates are low. Eat rice, bread or noodles in moderation.",
                "carbs.adequate": "Carbohydrate intake is appropriate.",
                "carbs.high": "Carbohydrate intake is too high. Go easy while cutting.",
                "fat.low": "Fat is low. Add quality oils such as olive oil and nuts.",
                "fat.adequate": "Fat intake is appropriate.",
                "fat.high": "Fat intake is too high. Avoid fried and greasy food.",
                "nutrition_advice.calories_low": "Calories are short. Eat proper meals.",
                "nutrition_advice.calories_high": "Calories are over target. Move more or review your meals.",
                "nutrition_advice.protein_low": "Protein is short. Eat a little more to maintain muscle.",
                "nutrition_advice.water_low": "Water intake is short. Drink regularly.",
                "bmi_category.underweight": "Underweight",
                "bmi_category.normal": "Normal weight",
                "bmi_category.overweight": "Overweight",
                "bmi_category.obese": "Obese",
                "body_fat_category.very_low": "Very low",
                "body_fat_category.low": "Low",
                "body_fat_category.normal": "Healthy",
                "body_fat_category.high": "High",
                "body_fat_category.very_high": "Very high",
                "progress_advice.behind": "More effort is needed to reach this goal.",
                "progress_advice.on_track": "On track. Keep going.",
                "progress_advice.nearly_there": "Great progress, the goal is close.",
                "goal_type.weight": "Lose 5 kg",
                "goal_type.steps": "10,000 steps a day",
                "goal_type.calories": "Burn 300 kcal a day",
                "goal_type.exercise": "Exercise 30 minutes a day",
                "goal_type.water": "Drink 2 L of water a day",
                "goal_type.sleep": "Sleep 7 hours a day",
            },
            "ja": {
                "sex.male": "男性",
                "sex.female": "女性",
                "activity_level.sedentary": "座り仕事中心",
                "activity_level.light": "軽い運動",
                "activity_level.moderate": "適度な運動",
                "activity_level.very_active": "激しい運動",
                "activity_level.extreme": "非常に激しい運動",
                "calorie_range.deficit": "カロリー不足",
                "calorie_range.maintenance": "維持",
                "calorie_range.surplus": "カロリー過多",
                "calorie_range.optimal_muscle_gain": "筋肉増加最適",
                "muscle_gain_prediction.low": "筋トレ頻度を増やしましょう",
                "muscle_gain_prediction.moderate": "現在のペースを維持しましょう",
                "muscle_gain_prediction.high": "素晴らしい進捗です",
                "muscle_gain_prediction.excellent": "理想的な筋トレ習慣です",
                "training_advice.increase_frequency": "週3回以上の筋トレを心がけましょう",
                "training_advice.reduce_for_recovery": "回復時間を確保するため、週5回以下に調整しましょう",
                "training_advice.extend_session": "筋トレ時間を30分以上に延長しましょう",
                "training_advice.shorten_session": "長時間の筋トレは疲労の原因になります",
                "training_advice.reduce_body_fat_first": "体脂肪率を下げることで筋肉増加効果が向上します",
                "training_advice.raise_intensity": "筋トレの強度と頻度を上げましょう",
                "training_advice.maintain_pace": "現在のペースを維持しましょう",
                "protein.low": "タンパク質が不足しています。",
                "protein.adequate": "タンパク質の摂取量は適切です。",
                "protein.high": "タンパク質の摂取量が多すぎます。",
                "carbs.low": "炭水化物が不足しています。",
                "carbs.adequate": "炭水化物の摂取量は適切です。",
                "carbs.high": "炭水化物の摂取量が多すぎます。",
                "fat.low": "脂質が不足しています。",
                "fat.adequate": "脂質の摂取量は適切です。",
                "fat.high": "脂質の摂取量が多すぎます。",
                "calorie_advice.keep_cutting": "体脂肪率が高めです。カロリー不足を継続し、週0.5kg程度の減量が理想的です。",
                "calorie_advice.light_cut": "軽いカロリー不足で筋肉を維持しながら脂肪を減らしましょう。",
                "calorie_advice.raise_intensity": "カロリーバランスは良好です。筋トレの強度を上げましょう。",
                "calorie_advice.improve_protein_and_frequency": "タンパク質摂取と筋トレ頻度を改善しましょう。",
                "calorie_advice.lean_surplus": "筋肉増加に適したカロリー過多です。体脂肪の増加に注意しましょう。",
                "calorie_advice.excess_surplus": "カロリーが多すぎます。摂取量を調整しましょう。",
                "calorie_advice.ideal_balance": "筋肉増加に理想的なカロリーバランスです。",
                "weekly_calorie_trend.insufficient_data": "データが不足しています",
                "weekly_calorie_trend.surplus": "週平均でカロリー過多です。",
                "weekly_calorie_trend.deficit": "週平均でカロリー不足です。",
                "weekly_calorie_trend.balanced_surplus": "適度なカロリー過多でバランスが良いです。",
                "weekly_calorie_trend.shortfall": "カロリーが不足気味です。栄養補給を改善しましょう。",
                "nutrition_advice.calories_low": "カロリーが不足しています。適切な食事を心がけましょう。",
                "nutrition_advice.calories_high": "カロリーが過多です。運動量を増やすか、食事を見直しましょう。",
                "nutrition_advice.protein_low": "タンパク質が不足しています。筋肉の維持のため、もう少し摂取しましょう。",
                "nutrition_advice.water_low": "水分摂取が不足しています。こまめに水分補給をしましょう。",
                "bmi_category.underweight": "低体重",
                "bmi_category.normal": "普通体重",
                "bmi_category.overweight": "過体重",
                "bmi_category.obese": "肥満",
                "body_fat_category.very_low": "非常に低い",
                "body_fat_category.low": "低い",
                "body_fat_category.normal": "標準",
                "body_fat_category.high": "高い",
                "body_fat_category.very_high": "非常に高い",
                "progress_advice.behind": "目標達成にはもう少し努力が必要です。",
                "progress_advice.on_track": "順調に進んでいます。この調子で続けましょう。",
                "progress_advice.nearly_there": "素晴らしい進捗です。目標達成まであと少しです。",
                "goal_type.weight": "体重を5kg減らす",
                "goal_type.steps": "1日10,000歩",
                "goal_type.calories": "1日300kcal消費",
                "goal_type.exercise": "1日30分運動",
                "goal_type.water": "1日2L水分摂取",
                "goal_type.sleep": "1日7時間睡眠",
            },
        }

    def set_language(self, lang: str) -> None:
        self.language = lang

    def gettext(self, key: str) -> str:
        value = self.translations.get(self.language, {}).get(key)
        if value is None:
            value = self.translations["en"].get(key, key)
        return value

    def describe(self, member: Enum, prefix: str | None = None) -> str:
        """Return display text for a categorical result."""
        return self.gettext(f"{prefix or _prefix(member)}.{member.value}")


def _prefix(member: Enum) -> str:
    name = type(member).__name__
    out = []
    for i, ch in enumerate(name):
        if ch.isupper() and i:
            out.append("_")
        out.append(ch.lower())
    return "".join(out)


translator = Translator()
